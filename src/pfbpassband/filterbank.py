#!/usr/bin/env python3
"""
CASPER Polyphase Filter Bank Description
========================================

A ``FilterbankSpec`` holds the handful of parameters that fully determine the
filter of a critically sampled CASPER-style PFB:

- ``nchan``: total number of channels, including the redundant negative
  frequency channels a real-input PFB may drop from its output
- ``ntaps``: number of overlapped windows ("taps")
- ``width``: where the prototype response is -6 dB, relative to the channel
  width (0 < width <= 1)
- ``window``: taper function, ``window(n)`` returns ``n`` samples
- ``lpf``: low-pass prototype evaluated at normalized offsets
- ``bug``: reproduce the CASPER coefficient generator that omits the
  half-sample centering offset

``coefs`` turns a spec into its ``nchan * ntaps`` tap weights.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from .errors import InvalidParameterError, SizeMismatchError, check_positive_int
from .windows import function_name, hamming, resolve_lpf, resolve_window, sinc

log = logging.getLogger(__name__)

_FLOAT_DTYPES = (np.float16, np.float32, np.float64)


@dataclass(frozen=True)
class FilterbankSpec:
    """Immutable description of a CASPER polyphase filter bank.

    All of these build the same spec::

        FilterbankSpec(16, 8, 1.0, hamming, sinc, False)
        FilterbankSpec(16, 8, width=1.0, window='hamming')
        FilterbankSpec(nchan=16, ntaps=8)
    """
    nchan: int
    ntaps: int
    width: float = 1.0
    window: Union[str, Callable] = hamming
    lpf: Union[str, Callable] = sinc
    bug: bool = False

    def __post_init__(self):
        check_positive_int('nchan', self.nchan)
        check_positive_int('ntaps', self.ntaps)
        if not isinstance(self.width, numbers.Real) or not 0 < self.width <= 1:
            raise InvalidParameterError(f"width must lie in (0, 1], got {self.width!r}")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'nchan', int(self.nchan))
        object.__setattr__(self, 'ntaps', int(self.ntaps))
        object.__setattr__(self, 'width', float(self.width))
        object.__setattr__(self, 'window', resolve_window(self.window))
        object.__setattr__(self, 'lpf', resolve_lpf(self.lpf))
        object.__setattr__(self, 'bug', bool(self.bug))

    def __repr__(self) -> str:
        return (
            f"FilterbankSpec(nchan={self.nchan}, ntaps={self.ntaps}, "
            f"width={self.width}, window={function_name(self.window)}, "
            f"lpf={function_name(self.lpf)}, bug={self.bug})"
        )

    __str__ = __repr__

    @property
    def ncoefs(self) -> int:
        """Length of the coefficient vector, ``nchan * ntaps``."""
        return self.nchan * self.ntaps

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nchan': self.nchan,
            'ntaps': self.ntaps,
            'width': self.width,
            'window': function_name(self.window),
            'lpf': function_name(self.lpf),
            'bug': self.bug,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'FilterbankSpec':
        return cls(**d)

    def coefs(self, dtype=np.float64, normalize: bool = True) -> np.ndarray:
        return coefs(self, dtype=dtype, normalize=normalize)


def _prototype_offsets(pfb: FilterbankSpec) -> np.ndarray:
    """Normalized offsets at which ``pfb.lpf`` is sampled.

    The half-sample centering term is dropped when ``pfb.bug`` is set,
    matching the deployed CASPER generator.
    """
    i = np.arange(pfb.ncoefs, dtype=np.float64)
    return pfb.width * ((i + 0.5 * (1 - pfb.bug)) / pfb.nchan - pfb.ntaps / 2)


def _synthesize(pfb: FilterbankSpec, normalize: bool) -> np.ndarray:
    n = pfb.ncoefs

    w = np.asarray(pfb.window(n), dtype=np.float64)
    if w.shape != (n,):
        raise SizeMismatchError(
            f"window {function_name(pfb.window)}({n}) returned shape {w.shape}, expected ({n},)"
        )

    p = np.asarray(pfb.lpf(_prototype_offsets(pfb)), dtype=np.float64)
    h = w * p

    if normalize:
        total = np.sum(h)
        if total == 0:
            raise InvalidParameterError(f"Coefficients of {pfb} sum to zero; cannot normalize")
        h /= total

    log.debug("Synthesized %d coefficients for %s (normalize=%s, sum=%.15e)",
              n, pfb, normalize, np.sum(h))
    return h


def coefs_into(dest: np.ndarray, pfb: FilterbankSpec, normalize: bool = True) -> np.ndarray:
    """
    Write the filter coefficients of ``pfb`` into ``dest``.

    The first ``pfb.nchan * pfb.ntaps`` elements receive the coefficients and
    any remaining elements are set to zero.

    Parameters
    ----------
    dest : np.ndarray
        One-dimensional destination buffer
    pfb : FilterbankSpec
        Filter bank design
    normalize : bool
        Scale the coefficients to unity DC gain (sum of 1.0)

    Returns
    -------
    np.ndarray
        ``dest``, for chaining

    Raises
    ------
    InvalidParameterError
        If ``dest`` is not a one-dimensional ndarray
    SizeMismatchError
        If ``dest`` is shorter than the coefficient vector

    Nothing is written to ``dest`` when an error is raised.
    """
    if not isinstance(dest, np.ndarray) or dest.ndim != 1:
        raise InvalidParameterError(
            f"dest must be a one-dimensional numpy array, got {type(dest).__name__}"
        )
    n = pfb.ncoefs
    if len(dest) < n:
        raise SizeMismatchError(f"len(dest) = {len(dest)} < nchan * ntaps = {n}")

    dest[:n] = _synthesize(pfb, normalize)
    dest[n:] = 0
    return dest


def coefs(pfb: FilterbankSpec, dtype=np.float64, normalize: bool = True) -> np.ndarray:
    """
    Return a new array holding the filter coefficients of ``pfb``.

    Parameters
    ----------
    pfb : FilterbankSpec
        Filter bank design
    dtype : numpy dtype
        float16, float32 or float64 (default)
    normalize : bool
        Scale the coefficients to unity DC gain (sum of 1.0)
    """
    dtype = _float_dtype(dtype)
    return coefs_into(np.empty(pfb.ncoefs, dtype=dtype), pfb, normalize=normalize)


def _float_dtype(dtype: Optional[Any]) -> np.dtype:
    try:
        dt = np.dtype(dtype)
    except TypeError:
        raise InvalidParameterError(f"Unsupported coefficient dtype {dtype!r}") from None
    if dt.type not in _FLOAT_DTYPES:
        raise InvalidParameterError(
            f"Coefficient dtype must be float16, float32 or float64, got {dt}"
        )
    return dt
