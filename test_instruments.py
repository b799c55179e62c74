#!/usr/bin/env python3
"""
Tests for the instrument PFB table and the FFT worker configuration.
"""

import os

import numpy as np
import pytest
from numpy.testing import assert_allclose

import pfbpassband
from pfbpassband import (
    INSTRUMENTS, get_instrument, ATA1K, COSMIC1K, GBT512,
    MEERKAT1K, MEERKAT4K, MEERKAT32K, hamming, hanning, sinc,
    FilterbankSpec, passband, get_num_threads, set_num_threads,
    InvalidParameterError,
)


@pytest.fixture
def restore_threads():
    previous = get_num_threads()
    yield
    set_num_threads(previous)


@pytest.mark.parametrize("spec,nchan,ntaps,width,window,bug", [
    (ATA1K, 2048, 4, 1.0, hamming, True),
    (GBT512, 1024, 12, 1.0, hamming, True),
    (MEERKAT1K, 2048, 16, 0.91, hanning, False),
    (MEERKAT4K, 8192, 16, 1.0, hanning, False),
    (MEERKAT32K, 65536, 4, 1.0, hanning, False),
])
def test_instrument_table(spec, nchan, ntaps, width, window, bug):
    assert spec.nchan == nchan
    assert spec.ntaps == ntaps
    assert spec.width == width
    assert spec.window is window
    assert spec.lpf is sinc
    assert spec.bug is bug


def test_cosmic_shares_ata_pfb():
    assert COSMIC1K is ATA1K


def test_registry():
    assert set(INSTRUMENTS) == {'ATA1K', 'COSMIC1K', 'GBT512',
                                'MEERKAT1K', 'MEERKAT4K', 'MEERKAT32K'}
    assert INSTRUMENTS['GBT512'] is GBT512
    with pytest.raises(TypeError):
        INSTRUMENTS['NEW'] = FilterbankSpec(16, 8)


def test_get_instrument():
    assert get_instrument('meerkat1k') is MEERKAT1K
    assert get_instrument('ATA1K') is ATA1K
    with pytest.raises(InvalidParameterError):
        get_instrument('VLA')


def test_instrument_passband():
    response = passband(ATA1K, 16)
    assert len(response) == 16
    assert response[8] == 1.0
    assert np.all(response >= 0)


# ───────────────────────── worker threads ────────────────────────── #

def test_default_threads():
    assert get_num_threads() >= 1


def test_set_threads(restore_threads):
    set_num_threads(3)
    assert set_num_threads(2) == 3
    assert get_num_threads() == 2
    assert pfbpassband.get_num_threads() == 2


def test_set_threads_default(restore_threads):
    set_num_threads(1)
    set_num_threads()
    assert get_num_threads() == (os.cpu_count() or 1)


@pytest.mark.parametrize("value", [0, -1, 1.5, '4', True])
def test_set_threads_invalid(restore_threads, value):
    before = get_num_threads()
    with pytest.raises(InvalidParameterError):
        set_num_threads(value)
    assert get_num_threads() == before


def test_threads_do_not_change_result(restore_threads):
    spec = FilterbankSpec(64, 8, window=hanning)
    set_num_threads(1)
    single = passband(spec, 128)
    set_num_threads(2)
    assert_allclose(passband(spec, 128), single, rtol=1e-12)


def test_set_threads_numpy_integer(restore_threads):
    set_num_threads(np.int64(2))
    assert get_num_threads() == 2
    assert type(get_num_threads()) is int
