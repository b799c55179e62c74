#!/usr/bin/env python3
"""
PFB Passband Calculator
=======================

Compute the coefficients and aliased channel passband of a CASPER polyphase
filter bank, either for a known instrument or for explicit parameters.

CLI examples
------------
# Passband of the ATA/COSMIC PFB at 1024 points per channel:
pfbpassband --instrument ATA1K --nfine 1024

# Custom design, save coefficients and response, plot:
pfbpassband --nchan 4096 --ntaps 8 --width 0.95 --window hanning \
    --nfine 512 --basename pfb4k --plot
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from .analysis import summarize_passband
from .config import get_num_threads, set_num_threads
from .errors import PFBError
from .filterbank import FilterbankSpec, coefs
from .instruments import INSTRUMENTS, get_instrument
from .passband import fine_frequencies, passband
from .windows import PROTOTYPES, WINDOWS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='pfbpassband',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Aliased passband response of a CASPER polyphase filter bank channel",
    )

    mode_group = p.add_mutually_exclusive_group()
    mode_group.add_argument("--instrument", "-i",
                            help="Named instrument PFB (see --list-instruments)")
    mode_group.add_argument("--nchan", "-n", type=int,
                            help="Total number of PFB channels")
    mode_group.add_argument("--list-instruments", action="store_true",
                            help="List known instrument PFBs and exit")

    g = p.add_argument_group("Design")
    g.add_argument("--ntaps", "-t", type=int, default=4,
                   help="Number of taps (ignored with --instrument)")
    g.add_argument("--width", "-w", type=float, default=1.0,
                   help="-6 dB point relative to channel width, 0 < width <= 1")
    g.add_argument("--window", choices=sorted(WINDOWS), default='hamming',
                   help="Window function")
    g.add_argument("--lpf", choices=sorted(PROTOTYPES), default='sinc',
                   help="Low-pass prototype function")
    g.add_argument("--bug", action="store_true",
                   help="Model the CASPER coefficient generator bug (no half-sample offset)")

    g = p.add_argument_group("Passband")
    g.add_argument("--nfine", "-f", type=int, default=256,
                   help="Points per coarse channel")
    g.add_argument("--no-normalize", action="store_true",
                   help="Do not scale coefficients to unity DC gain")
    g.add_argument("--threads", type=int,
                   help="FFT worker threads (default: host CPU count)")

    g = p.add_argument_group("Output")
    g.add_argument("--basename",
                   help="Save coefficients, response and metadata to <basename>.npz")
    g.add_argument("--plot", action="store_true",
                   help="Plot the passband (saved as <basename>.png when --basename is given)")
    g.add_argument("--debug", action="store_true",
                   help="Enable DEBUG-level logging")

    return p


def _spec_from_args(a: argparse.Namespace) -> FilterbankSpec:
    if a.instrument:
        return get_instrument(a.instrument)
    if a.nchan is None:
        raise PFBError("Either --instrument or --nchan is required")
    return FilterbankSpec(
        nchan=a.nchan, ntaps=a.ntaps, width=a.width,
        window=a.window, lpf=a.lpf, bug=a.bug
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    a = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if a.debug else logging.INFO,
        format='%(levelname)s: %(message)s'
    )
    log = logging.getLogger('pfbpassband')

    if a.list_instruments:
        for name, spec in INSTRUMENTS.items():
            print(f"{name:12s} {spec}")
        return 0

    try:
        if a.threads is not None:
            set_num_threads(a.threads)

        pfb = _spec_from_args(a)
        log.info("Filter bank: %s", pfb)
        log.info("FFT worker threads: %d", get_num_threads())

        h = coefs(pfb, normalize=not a.no_normalize)
        response = passband(h, pfb.nchan, a.nfine)
    except PFBError as e:
        log.error("%s", e)
        return 1

    summary = summarize_passband(response, plot=a.plot)
    figure = summary.pop('figure', None)

    if a.basename:
        np.savez_compressed(
            f"{a.basename}.npz",
            coefs=h,
            response=response,
            frequencies=fine_frequencies(a.nfine),
            metadata={'spec': pfb.to_dict(), 'nfine': a.nfine,
                      'normalize': not a.no_normalize, 'summary': summary},
        )
        log.info("Saved coefficients and passband to %s.npz", a.basename)

    if figure is not None:
        figure.axes[0].set_title(str(pfb))
        if a.basename:
            figure.savefig(f"{a.basename}.png", dpi=150)
            log.info("Saved plot to %s.png", a.basename)
        else:
            plt.show()

    print(f"\nPassband of {pfb}:")
    print(f"  Points per channel: {a.nfine}")
    print(f"  Channel edge: {summary['edge_db']:.3f} dB")
    print(f"  Central ripple: {summary['ripple_db']:.4f} dB")
    print(f"  -3 dB width: {summary['width_3db']:.3f} channels")
    print(f"  -6 dB width: {summary['width_6db']:.3f} channels")

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
