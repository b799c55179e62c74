#!/usr/bin/env python3
"""
Tests for passband summaries and the pfbpassband command line.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pfbpassband import (
    FilterbankSpec, passband, summarize_passband, to_db,
    get_num_threads, set_num_threads, InvalidParameterError,
)
from pfbpassband.cli import main


@pytest.fixture
def restore_threads():
    previous = get_num_threads()
    yield
    set_num_threads(previous)


def test_to_db():
    db = to_db(np.array([1.0, 0.5, 0.1, 0.0]))
    assert db[0] == 0.0
    assert db[1] == pytest.approx(-3.0103, abs=1e-4)
    assert db[2] == pytest.approx(-10.0)
    assert np.isfinite(db[3])


def test_summary():
    response = passband(FilterbankSpec(16, 8), 128)
    summary = summarize_passband(response)

    assert summary['nfine'] == 128
    assert summary['center_db'] == 0.0
    assert -4.6 < summary['edge_db'] < -1.8
    assert summary['min_db'] <= summary['edge_db']
    assert summary['max_db'] >= 0.0
    assert 0.0 <= summary['ripple_db'] < 0.1
    assert 0.5 < summary['width_3db'] <= summary['width_6db'] <= 1.0
    assert 'figure' not in summary


def test_summary_plot():
    response = passband(FilterbankSpec(16, 8), 64)
    summary = summarize_passband(response, plot=True)
    fig = summary['figure']
    assert len(fig.axes) == 1
    assert len(fig.axes[0].lines[0].get_xdata()) == 64
    plt.close(fig)


def test_summary_rejects_empty():
    with pytest.raises(InvalidParameterError):
        summarize_passband(np.array([]))


# ───────────────────────── CLI ────────────────────────── #

def test_cli_saves_results(tmp_path, restore_threads):
    base = tmp_path / "pfb16"
    rc = main(['--nchan', '16', '--ntaps', '8', '--nfine', '64',
               '--threads', '1', '--basename', str(base), '--plot'])
    assert rc == 0
    assert get_num_threads() == 1

    data = np.load(f"{base}.npz", allow_pickle=True)
    assert len(data['coefs']) == 128
    assert len(data['response']) == 64
    assert data['response'][32] == 1.0
    assert data['frequencies'][32] == 0.0
    assert data['metadata'].item()['spec']['window'] == 'hamming'
    assert (tmp_path / "pfb16.png").exists()
    plt.close('all')


def test_cli_instrument(capsys):
    assert main(['--instrument', 'gbt512', '--nfine', '32']) == 0
    out = capsys.readouterr().out
    assert 'nchan=1024' in out
    assert 'bug=True' in out


def test_cli_list_instruments(capsys):
    assert main(['--list-instruments']) == 0
    out = capsys.readouterr().out
    assert 'ATA1K' in out
    assert 'MEERKAT32K' in out


@pytest.mark.parametrize("argv", [
    ['--instrument', 'nope'],
    ['--nchan', '16', '--ntaps', '8', '--nfine', '1'],
    ['--nchan', '16', '--width', '1.5'],
    ['--ntaps', '8'],
    ['--nchan', '16', '--threads', '0'],
])
def test_cli_errors(argv, restore_threads):
    assert main(argv) == 1
