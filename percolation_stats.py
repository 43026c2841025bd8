import argparse
import math
import random

import numpy as np
from scipy.stats import linregress

from percolation import Percolation

# z-value of a two-sided 95% normal interval
CONFIDENCE_95 = 1.96


class PercolationStats:
    """
    Monte Carlo estimate of the percolation threshold of an n-by-n grid.

    Every trial opens uniformly random sites on a fresh grid until it
    percolates and records the fraction of open sites at that moment.
    """

    def __init__(self, n: int, trials: int, seed=None, rng=None, confidence=CONFIDENCE_95):
        """
        :param n: Grid size.
        :param trials: Number of independent trials.
        :param seed: Seed for a private random.Random, ignored when rng is given.
        :param rng: A random.Random to draw coordinates from.
        :param confidence: z-value used for the confidence interval.
        """
        if n <= 0 or trials <= 0:
            raise ValueError("grid size n and trials count must be positive integers")

        self.gridSize = n
        self.trialCount = trials
        self.confidence = confidence
        self.rng = rng if rng is not None else random.Random(seed)

        self.trialResults = np.empty(trials, dtype=float)
        for i in range(trials):
            self.trialResults[i] = self._run_trial()

    def _run_trial(self) -> float:
        simulator = Percolation(self.gridSize)
        while not simulator.percolates():
            row = self.rng.randint(1, self.gridSize)
            col = self.rng.randint(1, self.gridSize)
            simulator.open(row, col)
        return simulator.numberOfOpenSites() / (self.gridSize * self.gridSize)

    def samples(self):
        return self.trialResults.copy()

    def mean(self) -> float:
        return float(np.mean(self.trialResults))

    def stddev(self) -> float:
        """
        Sample standard deviation, NaN when only one trial was run.
        """
        if self.trialCount < 2:
            return math.nan
        return float(np.std(self.trialResults, ddof=1))

    def _half_width(self) -> float:
        return self.confidence * self.stddev() / math.sqrt(self.trialCount)

    def confidenceLo(self) -> float:
        return self.mean() - self._half_width()

    def confidenceHi(self) -> float:
        return self.mean() + self._half_width()

    def confidence_interval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self):
        print("=" * 60)
        print(f"STATS REPORT  n = {self.gridSize}, trials = {self.trialCount}")
        print("=" * 60)
        print(f"mean                    = {self.mean():.6f}")
        print(f"stddev                  = {self.stddev():.6f}")
        lo, hi = self.confidence_interval()
        print(f"95% confidence interval = [{lo:.6f}, {hi:.6f}]")
        print("=" * 60)


def threshold_sweep(sizes, trials: int, seed=None):
    """
    Runs PercolationStats for every grid size in 'sizes', drawing all
    coordinates from one shared generator.
    """
    rng = random.Random(seed)
    return [PercolationStats(int(n), trials, rng=rng) for n in sizes]


def extrapolate_threshold(sizes, means, exponent=-3/4):
    """
    Fits the mean threshold against L^exponent and returns the intercept,
    i.e. the estimate of p_c as L goes to infinity, with the fit's R^2.

    :param sizes: Grid sizes L.
    :param means: Mean threshold measured at each size.
    :param exponent: Finite-size scaling exponent (-1/nu, nu = 4/3 in 2D).
    """
    sizes = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)
    if sizes.shape != means.shape:
        raise ValueError("sizes and means must have the same length")
    if len(np.unique(sizes)) < 2:
        raise ValueError("need at least two distinct grid sizes to extrapolate")

    fit = linregress(sizes ** exponent, means)
    return float(fit.intercept), float(fit.rvalue ** 2)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of a square grid by Monte Carlo."
    )
    parser.add_argument('n', type=int, help="Size of the square grid (n x n).")
    parser.add_argument('trials', type=int, help="Number of Monte Carlo trials per grid size.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for the random generator.")
    parser.add_argument(
        '--Lmax', type=int, default=None,
        help="Sweep grid sizes from n up to Lmax and extrapolate p_c to infinite size.",
    )
    parser.add_argument('--Lstep', type=int, default=10, help="Step size for the sweep.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.n <= 0 or args.trials <= 0:
        parser.error("n and trials must be positive integers")

    if args.Lmax is None:
        PercolationStats(args.n, args.trials, seed=args.seed).report()
        return 0

    if args.Lstep <= 0 or args.Lmax <= args.n:
        parser.error("sweep needs Lstep > 0 and Lmax > n")

    sizes = list(range(args.n, args.Lmax + 1, args.Lstep))
    if len(sizes) < 2:
        parser.error("sweep needs at least two grid sizes, reduce --Lstep")

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (n): {args.n} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.trials}")

    results = threshold_sweep(sizes, args.trials, seed=args.seed)
    for stats in results:
        stats.report()

    pc_inf, r_squared = extrapolate_threshold(sizes, [s.mean() for s in results])
    print(f"\n--- Extrapolation Results (exponent {-3/4:.2f}) ---")
    print(f"pc(infinity) = {pc_inf:.6f}, R^2 = {r_squared:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
