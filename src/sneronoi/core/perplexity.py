"""
Perplexity calibration of the input-space conditional probabilities.

Implements Eq. (6) of van der Maaten 2014: for every point, a binary search
over the Gaussian precision beta until the entropy of p_{j|i} over the
point's nearest neighbors matches ln(perplexity).
"""

from collections import namedtuple

import numpy as np

from .. import config

ConditionalProbability = namedtuple('ConditionalProbability', ['j', 'value'])

Calibration = namedtuple('Calibration', ['probabilities', 'beta', 'entropy', 'tries', 'converged'])


def hbeta(distances, beta):
    """
    Computes the entropy H and the probability vector P for a given distance
    vector and precision beta.

    Probabilities at or below PROBABILITY_FLOOR are kept in P but do not
    contribute to H.
    """
    P = np.exp(-distances * beta)
    sumP = np.sum(P)
    if sumP == 0:
        # every weight underflowed
        P = np.zeros_like(distances)
    else:
        P = P / sumP
    mask = P > config.PROBABILITY_FLOOR
    H = -np.sum(P[mask] * np.log(P[mask]))
    return H, P


def calibrate(neighbors, h_target, tolerance=config.PERPLEXITY_TOLERANCE,
              max_tries=config.PERPLEXITY_MAX_TRIES):
    """
    Binary search for the precision beta of one point.

    Args:
        neighbors (list): NeighborEntry rows sorted by distance
        h_target (float): target entropy, ln(perplexity)
        tolerance (float): accepted |H - h_target|
        max_tries (int): cap on entropy evaluations; hitting it is not an error

    Returns:
        Calibration: probabilities plus the search diagnostics
    """
    distances = np.array([entry.distance for entry in neighbors], dtype=float)
    beta = 1.0  # beta = 1 / (2 sigma_i^2)
    betamin = None
    betamax = None
    tries = 0

    while True:
        H, P = hbeta(distances, beta)
        tries += 1
        converged = abs(H - h_target) < tolerance
        if converged or tries >= max_tries:
            break

        if H > h_target:
            # entropy too large, increase beta to make the distribution narrower
            betamin = beta
            if betamax is None:
                beta = beta * 2.
            else:
                beta = (beta + betamax) / 2.
        else:
            betamax = beta
            if betamin is None:
                beta = beta / 2.
            else:
                beta = (beta + betamin) / 2.

    probabilities = [ConditionalProbability(entry.index, float(p))
                     for entry, p in zip(neighbors, P)]
    return Calibration(probabilities, beta, float(H), tries, converged)


def p_j_given_i(neighbors, h_target, tolerance=config.PERPLEXITY_TOLERANCE,
                max_tries=config.PERPLEXITY_MAX_TRIES):
    """
    Conditional probabilities p_{j|i} over the nearest neighbors of one point.

    Returns:
        list: ConditionalProbability per neighbor, in the order given
    """
    return calibrate(neighbors, h_target, tolerance, max_tries).probabilities
