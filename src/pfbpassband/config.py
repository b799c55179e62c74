#!/usr/bin/env python3
"""
Process-wide FFT worker configuration.

The passband computation hands this count to ``scipy.fft`` as ``workers``.
The setting is a plain module global: change it only while no transform is
running.
"""

import logging
import os

from .errors import check_positive_int

log = logging.getLogger(__name__)


def _host_threads() -> int:
    return os.cpu_count() or 1


_num_threads = _host_threads()


def get_num_threads() -> int:
    """Return the number of worker threads used by the FFT."""
    return _num_threads


def set_num_threads(num_threads=None) -> int:
    """
    Set the number of worker threads used by the FFT.

    Parameters
    ----------
    num_threads : int, optional
        Positive thread count.  Defaults to the number of host CPUs.

    Returns
    -------
    int
        The previous setting
    """
    global _num_threads

    if num_threads is None:
        num_threads = _host_threads()
    num_threads = check_positive_int('num_threads', num_threads)

    previous = _num_threads
    _num_threads = int(num_threads)
    log.debug("FFT worker threads: %d -> %d", previous, _num_threads)
    return previous
