"""
t-SNE optimizer producing a 2D embedding by gradient descent.

The input-space conditional probabilities are calibrated once in init_data();
every take_step() recomputes attractive and repulsive forces against the
current solution and applies a momentum + adaptive gain update.
"""

import math

import numpy as np

from .nearest_neighbors import NearestNeighbors
from .perplexity import calibrate
from .point import Point, as_points
from .repulsion import select_repulsion
from .rng import SeededRandom
from .. import config as settings

DEFAULTS = {
    'perplexity': settings.DEFAULT_PERPLEXITY,
    'early_exaggeration': settings.DEFAULT_EARLY_EXAGGERATION,
    'learning_rate': settings.DEFAULT_LEARNING_RATE,
    'max_iter': settings.DEFAULT_MAX_ITER,
    'neighborhood_multiplier': settings.DEFAULT_NEIGHBORHOOD_MULTIPLIER,
    'theta': settings.DEFAULT_THETA,
    'barnes_hut_cutoff': settings.DEFAULT_BARNES_HUT_CUTOFF,
    'verbose': False,
}


def validate_config(cfg):
    """
    Merge a user config mapping with the defaults and check the values.

    Raises:
        ValueError: on unknown keys or out-of-range values
    """
    cfg = dict(cfg or {})
    unknown = set(cfg) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown t-SNE config keys: {sorted(unknown)}")
    merged = dict(DEFAULTS)
    merged.update(cfg)

    if merged['perplexity'] <= 0:
        raise ValueError("perplexity must be positive")
    if merged['early_exaggeration'] < 1:
        raise ValueError("early_exaggeration must be at least 1")
    if merged['learning_rate'] <= 0:
        raise ValueError("learning_rate must be positive")
    if merged['neighborhood_multiplier'] <= 0:
        raise ValueError("neighborhood_multiplier must be positive")
    if merged['theta'] < 0:
        raise ValueError("theta must be non-negative")
    if merged['barnes_hut_cutoff'] < 0:
        raise ValueError("barnes_hut_cutoff must be non-negative")
    return merged


class TSNE:
    """
    Barnes-Hut capable t-SNE for 2D output.

    Args:
        config (dict, optional): perplexity, early_exaggeration, learning_rate,
            max_iter, neighborhood_multiplier, theta, barnes_hut_cutoff, verbose
        rnd (optional): random source exposing r_norm(mean, sd);
            a fresh SeededRandom if not given

    After init_data(), `solution` holds the current embedding as an (N, 2)
    array and `current_iter` the number of steps taken.
    """

    def __init__(self, config=None, rnd=None):
        cfg = validate_config(config)
        self.perplexity = cfg['perplexity']
        self.early_exaggeration = cfg['early_exaggeration']
        self.learning_rate = cfg['learning_rate']
        self.max_iter = cfg['max_iter']
        self.neighborhood_multiplier = cfg['neighborhood_multiplier']
        self.theta = cfg['theta']
        self.barnes_hut_cutoff = cfg['barnes_hut_cutoff']
        self.verbose = cfg['verbose']

        self.rnd = rnd if rnd is not None else SeededRandom()

        # number of nearest neighbors in the input space
        self.nneighbors = int(math.floor(self.neighborhood_multiplier * self.perplexity))
        # target entropy given by the perplexity
        self.H_target = settings.target_entropy(self.perplexity)

        self.N = 0
        self.pj_given_i = None
        self.solution = None
        self.previous_step = None
        self.gain = None
        self.current_iter = 0
        self.unconverged = 0
        self.repulsion = None
        # flattened (i, j, p_{j|i}) triples for the attractive pass
        self._pair_i = None
        self._pair_j = None
        self._pair_p = None

    @property
    def initialized(self):
        return self.solution is not None

    def init_data(self, point_data):
        """
        Set up the optimizer for the given input points.

        Args:
            point_data: sequence of Point objects or array-like of shape (N, 2)

        Raises:
            ValueError: if point_data is empty
        """
        points = as_points(point_data)
        if not points:
            raise ValueError("init_data requires at least one point")
        self.N = len(points)

        if self.verbose:
            print("Computing nearest neighbors for %d points..." % self.N)
        nn = NearestNeighbors(points, self.nneighbors)
        input_distances = nn.get_neighbors()

        # conditional probabilities never change after this
        self.pj_given_i = []
        self.unconverged = 0
        for i in range(self.N):
            if self.verbose and i % settings.CALIBRATION_LOG_EVERY == 0:
                print("Computing P-values for point %d of %d..." % (i, self.N))
            result = calibrate(input_distances[i], self.H_target)
            if not result.converged:
                self.unconverged += 1
            self.pj_given_i.append(result.probabilities)
        if self.verbose and self.unconverged:
            print("Perplexity search hit the iteration cap for %d of %d points" % (self.unconverged, self.N))

        self._pair_i = np.array([i for i, row in enumerate(self.pj_given_i) for _ in row], dtype=int)
        self._pair_j = np.array([cp.j for row in self.pj_given_i for cp in row], dtype=int)
        self._pair_p = np.array([cp.value for row in self.pj_given_i for cp in row], dtype=float)

        self.solution = self._random_solution(self.N)
        self.previous_step = np.zeros((self.N, 2))
        self.gain = np.ones((self.N, 2))
        self.current_iter = 0
        self.repulsion = select_repulsion(self.N, self.theta, self.barnes_hut_cutoff)
        if self.verbose:
            print("Using %s repulsion" % self.repulsion.name)

    def _random_solution(self, n, sd=settings.INITIAL_SOLUTION_SD):
        out = np.zeros((n, 2))
        for i in range(n):
            out[i, 0] = self.rnd.r_norm(0, sd)
            out[i, 1] = self.rnd.r_norm(0, sd)
        return out

    def take_step(self):
        """
        Advance the solution by one gradient-descent iteration.

        Raises:
            RuntimeError: if init_data() has not been called
        """
        if not self.initialized:
            raise RuntimeError("TSNE.take_step() called before init_data()")

        if self.current_iter < settings.EXAGGERATION_ITERS:
            exaggeration = self.early_exaggeration
        else:
            exaggeration = 1
        if self.current_iter < settings.MOMENTUM_SWITCH_ITER:
            alpha = settings.INITIAL_MOMENTUM
        else:
            alpha = settings.FINAL_MOMENTUM
        self.current_iter += 1

        gradient = self.calculate_gradient(exaggeration)

        same_sign = np.sign(gradient) == np.sign(self.previous_step)
        gain = np.where(same_sign, self.gain * settings.GAIN_DECAY, self.gain + settings.GAIN_INCREMENT)
        # never run the gain to zero
        self.gain = np.maximum(gain, settings.MIN_GAIN)

        step = -self.learning_rate * self.gain * gradient + alpha * self.previous_step
        self.solution += step
        self.previous_step = step
        self.solution -= np.mean(self.solution, axis=0)

        if self.verbose and self.current_iter % settings.LOG_EVERY == 0:
            self._report()

    def calculate_gradient(self, exaggeration=1):
        """Full gradient 4 * (exaggeration * F_attr + F_rep) as an (N, 2) array."""
        if not self.initialized:
            raise RuntimeError("TSNE.calculate_gradient() called before init_data()")
        Fattr = self.calc_fattr()
        Frep = self.calc_frep()
        return settings.GRADIENT_SCALE * (exaggeration * Fattr + Frep)

    def calc_fattr(self):
        """
        Attractive forces: p_{j|i} * q_ij Z / 2N along (y_i - y_j), applied
        to i and mirrored onto j (symmetrization, Eq. (7) of van der Maaten 2014).
        """
        N = self.N
        Fattr = np.zeros((N, 2))
        if self._pair_i.size == 0:
            return Fattr
        diff = self.solution[self._pair_i] - self.solution[self._pair_j]
        d = np.sum(diff * diff, axis=1)
        w = self._pair_p / (1. + d) / (2 * N)
        f = diff * w[:, None]
        np.add.at(Fattr, self._pair_i, f)
        np.add.at(Fattr, self._pair_j, -f)
        return Fattr

    def calc_frep(self):
        """Repulsive forces with the strategy chosen for this problem size."""
        return self.repulsion.compute(self.solution)

    def solution_points(self):
        """Copy of the current solution as a list of Point objects."""
        if not self.initialized:
            return []
        return [Point(float(x), float(y)) for x, y in self.solution]

    def joint_probabilities(self):
        """Symmetrized input affinities p_ij = (p_{j|i} + p_{i|j}) / 2N as a dense array."""
        N = self.N
        P = np.zeros((N, N))
        np.add.at(P, (self._pair_i, self._pair_j), self._pair_p)
        return (P + P.T) / (2 * N)

    def kl_divergence(self):
        """
        Exact KL(P || Q) of the current solution. O(N^2), meant for
        diagnostics on moderate N.
        """
        if not self.initialized:
            raise RuntimeError("TSNE.kl_divergence() called before init_data()")
        P = self.joint_probabilities()
        Y = self.solution
        sum_Y = np.sum(Y * Y, 1)
        D = np.maximum(sum_Y[:, None] + sum_Y[None, :] - 2. * Y @ Y.T, 0.)
        num = 1. / (1. + D)
        np.fill_diagonal(num, 0.)
        Z = np.sum(num)
        if Z == 0:
            return 0.0
        Q = np.maximum(num / Z, 1e-12)
        mask = P > 0
        return float(np.sum(P[mask] * np.log(P[mask] / Q[mask])))

    def _report(self):
        if self.N <= self.barnes_hut_cutoff:
            print("Iteration %d: error is %f" % (self.current_iter, self.kl_divergence()))
        else:
            print("Iteration %d" % self.current_iter)
