#!/usr/bin/env python3
"""
Window and Prototype Functions
==============================

Built-in taper windows and the default low-pass prototype used when
synthesizing PFB coefficients.  The windows follow the CASPER convention of
evaluating the cosine over ``n`` points linearly spaced on [-1, 1] inclusive.

Custom functions can be used anywhere a built-in is accepted: a window takes
an integer length and returns that many samples, a prototype takes an
ndarray of normalized offsets and returns an ndarray of the same shape.
"""

from typing import Callable, Dict, Union

import numpy as np

from .errors import InvalidParameterError


def _abscissa(n: int) -> np.ndarray:
    return np.linspace(-1.0, 1.0, n, dtype=np.float64)


def hamming(n: int) -> np.ndarray:
    """Hamming window, 0.08 at both ends and 1.0 in the middle."""
    return 0.54 + 0.46 * np.cos(np.pi * _abscissa(n))


def hanning(n: int) -> np.ndarray:
    """Hanning (raised cosine) window, zero at both ends."""
    return 0.5 * (1.0 + np.cos(np.pi * _abscissa(n)))


def sinc(x):
    """Normalized sinc, sin(pi*x)/(pi*x) with sinc(0) == 1."""
    # np.sinc handles x=0 with the proper limit
    return np.sinc(x)


WINDOWS: Dict[str, Callable] = {
    'hamming': hamming,
    'hanning': hanning,
}

PROTOTYPES: Dict[str, Callable] = {
    'sinc': sinc,
}


def _resolve(value: Union[str, Callable], table: Dict[str, Callable], kind: str) -> Callable:
    if isinstance(value, str):
        try:
            return table[value.lower()]
        except KeyError:
            raise InvalidParameterError(
                f"Unknown {kind} '{value}' (known: {', '.join(sorted(table))})"
            ) from None
    if not callable(value):
        raise InvalidParameterError(f"{kind} must be callable or a name, got {value!r}")
    return value


def resolve_window(window: Union[str, Callable]) -> Callable:
    """Return the window function for a name or pass a callable through."""
    return _resolve(window, WINDOWS, 'window')


def resolve_lpf(lpf: Union[str, Callable]) -> Callable:
    """Return the prototype function for a name or pass a callable through."""
    return _resolve(lpf, PROTOTYPES, 'lpf')


def function_name(func: Callable) -> str:
    """Stable display name for a window or prototype function."""
    return getattr(func, '__name__', None) or repr(func)
