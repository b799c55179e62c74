#!/usr/bin/env python3
"""
Aliased Passband of a PFB Channel
=================================

The response of one coarse channel after decimation is the sum of the
powers of every spectral image that folds into it.  Laying the filter out as
an (nfine, nchan) matrix, one tap per row, and taking its 2D FFT gives all of
those images at once: the fine axis resolves frequency within the channel,
the channel axis enumerates the images.

Only the non-negative half of the channel axis is computed (real input), so
the mirrored half is added back from the conjugate-symmetric bins rather
than materialized.
"""

import logging
from typing import Optional, Union

import numpy as np
import scipy.fft

from .config import get_num_threads
from .errors import InvalidParameterError, ResolutionTooLowError, check_positive_int
from .filterbank import FilterbankSpec, coefs

log = logging.getLogger(__name__)


def _polyphase_matrix(h, nchan: int, nfine: int) -> np.ndarray:
    """
    Zero-padded (nfine, nchan) matrix with tap ``j`` of ``h`` in row ``j``.

    Raises ResolutionTooLowError when ``h`` does not fit.
    """
    nchan = check_positive_int('nchan', nchan)
    nfine = check_positive_int('nfine', nfine)

    h = np.asarray(h, dtype=np.float64)
    if h.ndim != 1:
        raise InvalidParameterError(f"h must be one-dimensional, got shape {h.shape}")
    if nchan * nfine < len(h):
        raise ResolutionTooLowError(
            f"nfine is too small: nchan * nfine = {nchan * nfine} < len(h) = {len(h)}"
        )

    m = np.zeros((nfine, nchan), dtype=np.float64)
    m.reshape(-1)[:len(h)] = h
    return m


def _normalize_and_shift(response: np.ndarray) -> np.ndarray:
    if not response[0] > 0:
        raise InvalidParameterError("Channel-center power is zero; cannot normalize response")
    response /= response[0]
    # Natural order: reference bin moves to index nfine // 2
    return np.roll(response, len(response) // 2)


def _aliased_response(h, nchan: int, nfine: int) -> np.ndarray:
    m = _polyphase_matrix(h, nchan, nfine)
    nchan = m.shape[1]

    fm = scipy.fft.rfft2(m, workers=get_num_threads())
    power = fm.real**2 + fm.imag**2

    response = power.sum(axis=1)

    # Negative-frequency bins mirror the interior of the reduced axis.  An
    # even nchan has a Nyquist bin with no mirror; an odd nchan does not.
    interior = power[:, 1:-1] if nchan % 2 == 0 else power[:, 1:]
    mirrored = interior.sum(axis=1)
    response[0] += mirrored[0]
    response[1:] += mirrored[:0:-1]

    log.debug("Passband: nchan=%d nfine=%d ntaps=%.3g workers=%d",
              nchan, nfine, len(np.asarray(h)) / nchan, get_num_threads())

    return _normalize_and_shift(response)


def passband(
    h: Union[np.ndarray, FilterbankSpec],
    nchan: Optional[int] = None,
    nfine: Optional[int] = None
) -> np.ndarray:
    """
    Compute the aliased passband response of one PFB channel.

    Can be called either with raw coefficients::

        passband(h, nchan, nfine)

    or with a filter bank design, whose coefficients are synthesized with
    default normalization::

        passband(pfb, nfine)

    Parameters
    ----------
    h : np.ndarray or FilterbankSpec
        Filter coefficients, or a design to synthesize them from
    nchan : int
        Number of PFB channels (omitted for a FilterbankSpec)
    nfine : int
        Number of points evenly spaced across the coarse channel

    Returns
    -------
    np.ndarray
        ``nfine`` power values relative to the channel center, in natural
        order.  The channel center is at index ``nfine // 2`` and is 1.0.

    Raises
    ------
    ResolutionTooLowError
        If ``nchan * nfine < len(h)``
    """
    if isinstance(h, FilterbankSpec):
        pfb = h
        if nfine is None:
            nfine = nchan
        elif nchan is not None and nchan != pfb.nchan:
            raise InvalidParameterError(
                f"nchan={nchan} conflicts with {pfb}"
            )
        if nfine is None:
            raise InvalidParameterError("nfine is required")
        return _aliased_response(coefs(pfb), pfb.nchan, nfine)

    if nchan is None or nfine is None:
        raise InvalidParameterError("passband(h, nchan, nfine) requires nchan and nfine")
    return _aliased_response(h, nchan, nfine)


def passband_reference(h, nchan: int, nfine: int) -> np.ndarray:
    """
    Brute-force version of ``passband`` using the full complex 2D FFT.

    Every channel bin is summed directly, so no mirroring is involved.  Much
    more expensive than ``passband``; intended for validating it on small
    designs.
    """
    m = _polyphase_matrix(h, nchan, nfine)

    fm = scipy.fft.fft2(m, workers=get_num_threads())
    response = (np.abs(fm)**2).sum(axis=1)

    return _normalize_and_shift(response)


def fine_frequencies(nfine: int) -> np.ndarray:
    """
    Fine-frequency offsets matching the order of ``passband`` output.

    Offsets are in units of the coarse channel width; the channel center is
    0.0 at index ``nfine // 2``.
    """
    nfine = check_positive_int('nfine', nfine)
    return (np.arange(nfine) - nfine // 2) / nfine
