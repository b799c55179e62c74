#!/usr/bin/env python3
"""
Summary metrics for PFB passband responses.
"""

import logging
from typing import Any, Dict

import numpy as np
import matplotlib.pyplot as plt

from .errors import InvalidParameterError
from .passband import fine_frequencies

log = logging.getLogger(__name__)


def to_db(response: np.ndarray) -> np.ndarray:
    """Convert a power response to dB; zeros map to about -3000 dB, not -inf."""
    return 10 * np.log10(np.asarray(response, dtype=np.float64) + 1e-300)


def summarize_passband(response: np.ndarray, plot: bool = False) -> Dict[str, Any]:
    """
    Measure the shape of a passband returned by ``passband``.

    Parameters
    ----------
    response : np.ndarray
        Normalized power response in natural order (center at ``nfine // 2``)
    plot : bool
        Attach a matplotlib figure of the response under ``'figure'``

    Returns
    -------
    dict
        ``nfine``, ``center_db``, ``edge_db`` (lower channel edge),
        ``min_db``, ``max_db``, ``ripple_db`` (peak-to-peak over the central
        half of the channel), ``width_3db`` and ``width_6db`` (fraction of the
        channel at or above -3 dB / -6 dB)
    """
    response = np.asarray(response, dtype=np.float64)
    if response.ndim != 1 or len(response) == 0:
        raise InvalidParameterError(f"response must be a non-empty 1-D array, got shape {response.shape}")

    nfine = len(response)
    freqs = fine_frequencies(nfine)
    mag_db = to_db(response)

    central = np.abs(freqs) <= 0.25

    results = {
        'nfine': nfine,
        'center_db': float(mag_db[nfine // 2]),
        'edge_db': float(mag_db[0]),
        'min_db': float(mag_db.min()),
        'max_db': float(mag_db.max()),
        'ripple_db': float(np.ptp(mag_db[central])),
        'width_3db': float(np.count_nonzero(mag_db >= -3.0) / nfine),
        'width_6db': float(np.count_nonzero(mag_db >= -6.0) / nfine),
    }

    log.info("Passband: edge %.3f dB, ripple %.4f dB, -3 dB width %.3f, -6 dB width %.3f",
             results['edge_db'], results['ripple_db'],
             results['width_3db'], results['width_6db'])

    if plot:
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot(freqs, mag_db)
        ax.axhline(-3, color='r', linestyle='--', label='-3 dB')
        ax.set_xlabel('Fine frequency (coarse channels)')
        ax.set_ylabel('Power (dB)')
        ax.set_title('Aliased Channel Passband')
        ax.grid(True, alpha=0.3)
        ax.legend()
        results['figure'] = fig

    return results
