"""
Seeded random number source shared by the scene generators and the optimizer.

A thin wrapper around numpy's Generator so that one seed (an int or any
string, e.g. a hash) reproduces a whole run.
"""

import hashlib

import numpy as np

SEED_ALPHABET = "0123456789abcdef"


def seed_to_int(seed):
    """Map an int or string seed to a non-negative integer for numpy."""
    if isinstance(seed, (int, np.integer)):
        return int(seed)
    digest = hashlib.sha256(str(seed).encode('utf-8')).hexdigest()
    return int(digest[:32], 16)


class SeededRandom:
    """
    Random number generator seeded by an int or string.

    Args:
        seed (int or str, optional): If not provided, a random hex seed is
            generated (and printed unless quiet is set).
        quiet (bool): suppress the seed report
    """

    def __init__(self, seed=None, quiet=True):
        self.set_seed(seed, quiet)

    def set_seed(self, seed=None, quiet=True):
        """Re-initialize the generator with a new seed."""
        if seed is None:
            seed = ''.join(np.random.default_rng().choice(list(SEED_ALPHABET), size=32))
            if not quiet:
                print("New SeededRandom without specified seed. Using seed:", seed)
        elif not quiet:
            print("New SeededRandom with seed:", seed)
        self.seed = seed
        self._rng = np.random.default_rng(seed_to_int(seed))

    def r_unif(self, a=0.0, b=1.0):
        """Uniform random number in [a, b)."""
        return float(self._rng.uniform(a, b))

    def r_norm(self, mean=0.0, sd=1.0):
        """Normally distributed random number."""
        return float(self._rng.normal(mean, sd))

    def choose_one(self, seq):
        """Pick one element of seq uniformly."""
        if len(seq) == 0:
            raise ValueError("cannot choose from an empty sequence")
        return seq[int(self._rng.integers(len(seq)))]

    def choose_one_weighted(self, seq, weights):
        """Pick one element of seq with probability proportional to weights."""
        if len(seq) != len(weights):
            raise ValueError("seq and weights must have the same length")
        weights = np.asarray(weights, dtype=float)
        total = weights.sum()
        if total <= 0:
            raise ValueError("weights must sum to a positive value")
        return seq[int(self._rng.choice(len(seq), p=weights / total))]
