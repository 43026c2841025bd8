import math
import random

import numpy as np
import pytest

from percolation_stats import (
    CONFIDENCE_95,
    PercolationStats,
    extrapolate_threshold,
    main,
    threshold_sweep,
)


@pytest.mark.parametrize("n, trials", [(0, 5), (5, 0), (-1, 3), (3, -2)])
def test_rejects_non_positive_arguments(n, trials):
    with pytest.raises(ValueError):
        PercolationStats(n, trials)


def test_samples_are_valid_fractions():
    stats = PercolationStats(8, 20, seed=1)
    samples = stats.samples()
    assert samples.shape == (20,)
    assert np.all(samples > 0)
    assert np.all(samples <= 1)
    # at least one full column is needed before a 8x8 grid percolates
    assert np.all(samples >= 8 / 64)


def test_single_cell_threshold_is_one():
    stats = PercolationStats(1, 3, seed=0)
    assert stats.mean() == 1.0
    assert stats.stddev() == 0.0


def test_single_trial_has_undefined_stddev():
    stats = PercolationStats(4, 1, seed=0)
    assert math.isnan(stats.stddev())


def test_seed_makes_runs_reproducible():
    a = PercolationStats(6, 10, seed=42)
    b = PercolationStats(6, 10, seed=42)
    np.testing.assert_array_equal(a.samples(), b.samples())


def test_explicit_rng_is_used():
    a = PercolationStats(6, 5, rng=random.Random(7))
    b = PercolationStats(6, 5, seed=7)
    np.testing.assert_array_equal(a.samples(), b.samples())


def test_statistics_and_interval():
    stats = PercolationStats(10, 30, seed=3)
    samples = stats.samples()
    assert stats.mean() == pytest.approx(samples.mean())
    assert stats.stddev() == pytest.approx(samples.std(ddof=1))

    half = CONFIDENCE_95 * stats.stddev() / math.sqrt(30)
    lo, hi = stats.confidence_interval()
    assert lo == pytest.approx(stats.mean() - half)
    assert hi == pytest.approx(stats.mean() + half)
    assert stats.confidenceLo() <= stats.mean() <= stats.confidenceHi()


def test_custom_confidence_widens_interval():
    narrow = PercolationStats(6, 10, seed=5)
    wide = PercolationStats(6, 10, seed=5, confidence=2.576)
    assert wide.confidenceHi() - wide.confidenceLo() > narrow.confidenceHi() - narrow.confidenceLo()


def test_samples_returns_a_copy():
    stats = PercolationStats(3, 4, seed=0)
    stats.samples()[:] = -1
    assert np.all(stats.samples() > 0)


def test_mean_is_near_known_threshold():
    stats = PercolationStats(30, 50, seed=11)
    assert 0.5 < stats.mean() < 0.7


def test_report_prints_summary(capsys):
    PercolationStats(4, 3, seed=0).report()
    out = capsys.readouterr().out
    assert "STATS REPORT" in out
    assert "95% confidence interval" in out


def test_threshold_sweep_returns_one_result_per_size():
    results = threshold_sweep([2, 4, 6], 3, seed=0)
    assert [r.gridSize for r in results] == [2, 4, 6]
    assert all(r.trialCount == 3 for r in results)


def test_extrapolation_recovers_intercept():
    sizes = np.array([10, 20, 40, 80])
    means = 0.5927 + 0.3 * sizes ** (-3 / 4)
    pc_inf, r_squared = extrapolate_threshold(sizes, means)
    assert pc_inf == pytest.approx(0.5927)
    assert r_squared == pytest.approx(1.0)


def test_extrapolation_needs_two_sizes():
    with pytest.raises(ValueError):
        extrapolate_threshold([10, 10], [0.6, 0.61])
    with pytest.raises(ValueError):
        extrapolate_threshold([10, 20], [0.6])


def test_cli_single_size(capsys):
    assert main(["5", "4", "--seed", "1"]) == 0
    assert "STATS REPORT" in capsys.readouterr().out


def test_cli_sweep(capsys):
    assert main(["4", "3", "--seed", "1", "--Lmax", "8", "--Lstep", "2"]) == 0
    assert "pc(infinity)" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["0", "5"], ["5", "0"], ["4", "3", "--Lmax", "4"]])
def test_cli_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)
