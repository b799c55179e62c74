"""
pfbpassband - Coefficients and aliased channel passbands of CASPER polyphase filter banks.
"""

from .errors import PFBError, SizeMismatchError, ResolutionTooLowError, InvalidParameterError
from .windows import hamming, hanning, sinc
from .filterbank import FilterbankSpec, coefs, coefs_into
from .passband import passband, passband_reference, fine_frequencies
from .config import get_num_threads, set_num_threads
from .instruments import (
    INSTRUMENTS, get_instrument,
    ATA1K, COSMIC1K, GBT512, MEERKAT1K, MEERKAT4K, MEERKAT32K,
)
from .analysis import to_db, summarize_passband

__version__ = "0.1.0"
__all__ = [
    "PFBError",
    "SizeMismatchError",
    "ResolutionTooLowError",
    "InvalidParameterError",
    "hamming",
    "hanning",
    "sinc",
    "FilterbankSpec",
    "coefs",
    "coefs_into",
    "passband",
    "passband_reference",
    "fine_frequencies",
    "get_num_threads",
    "set_num_threads",
    "INSTRUMENTS",
    "get_instrument",
    "ATA1K",
    "COSMIC1K",
    "GBT512",
    "MEERKAT1K",
    "MEERKAT4K",
    "MEERKAT32K",
    "to_db",
    "summarize_passband",
]
