#!/usr/bin/env python3
"""
PFB designs of deployed instruments.
"""

from types import MappingProxyType

from .errors import InvalidParameterError
from .filterbank import FilterbankSpec
from .windows import hamming, hanning, sinc

ATA1K = FilterbankSpec(
    nchan=2**11, ntaps=4, width=1.0, window=hamming, lpf=sinc, bug=True
)

# COSMIC uses same PFB as ATA
COSMIC1K = ATA1K

GBT512 = FilterbankSpec(
    nchan=2**10, ntaps=12, width=1.0, window=hamming, lpf=sinc, bug=True
)

MEERKAT1K = FilterbankSpec(
    nchan=2**11, ntaps=16, width=0.91, window=hanning, lpf=sinc, bug=False
)

MEERKAT4K = FilterbankSpec(
    nchan=2**13, ntaps=16, width=1.00, window=hanning, lpf=sinc, bug=False
)

MEERKAT32K = FilterbankSpec(
    nchan=2**16, ntaps=4, width=1.00, window=hanning, lpf=sinc, bug=False
)

INSTRUMENTS = MappingProxyType({
    'ATA1K': ATA1K,
    'COSMIC1K': COSMIC1K,
    'GBT512': GBT512,
    'MEERKAT1K': MEERKAT1K,
    'MEERKAT4K': MEERKAT4K,
    'MEERKAT32K': MEERKAT32K,
})


def get_instrument(name: str) -> FilterbankSpec:
    """Look up an instrument PFB by name, ignoring case."""
    try:
        return INSTRUMENTS[name.upper()]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown instrument '{name}' (known: {', '.join(INSTRUMENTS)})"
        ) from None
