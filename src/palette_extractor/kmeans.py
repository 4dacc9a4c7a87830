from dataclasses import dataclass

import numpy as np
from loguru import logger

# =========================
# K-means on RGB samples (k-means++ seeding)
# =========================

@dataclass
class ClusterResult:
    centroids: np.ndarray   # (k, 3) float64
    labels: np.ndarray      # (N,) index of the centroid each sample belongs to
    counts: np.ndarray      # (k,) samples per centroid, from the final labels
    iterations: int
    converged: bool


def _check_samples(samples):
    arr = np.asarray(samples)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected samples with shape (N, 3), got {arr.shape}")
    if arr.shape[0] == 0:
        raise ValueError("Cannot cluster an empty sample set")
    arr = arr.astype(np.float64)
    if not np.isfinite(arr).all():
        raise ValueError("Samples contain non-finite values")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError("Sample channels must be in 0..255")
    return arr


def squared_distances(samples, centroids):
    # (N, k): sum over R, G, B of squared differences, channels weighted equally
    diff = samples[:, None, :] - centroids[None, :, :]
    return np.einsum("nkc,nkc->nk", diff, diff)


def seed_centroids(samples, k, rng):
    """
    Pick k initial centroids from the samples.

    The first one is uniform; each next one is drawn with probability
    proportional to its squared distance to the nearest centroid already chosen.
    """
    n = samples.shape[0]
    centroids = np.empty((k, 3), dtype=np.float64)
    centroids[0] = samples[int(rng.integers(n))]

    nearest = squared_distances(samples, centroids[:1])[:, 0]
    for i in range(1, k):
        cumulative = np.cumsum(nearest)
        total = cumulative[-1]
        if total > 0:
            r = float(rng.random()) * total
            idx = min(int(np.searchsorted(cumulative, r, side="right")), n - 1)
        else:
            # every sample already sits on a centroid
            idx = 0
        centroids[i] = samples[idx]
        nearest = np.minimum(nearest, squared_distances(samples, centroids[i:i + 1])[:, 0])
    return centroids


def assign_samples(samples, centroids):
    # argmin keeps the first index on exact ties
    return np.argmin(squared_distances(samples, centroids), axis=1)


def update_centroids(samples, labels, centroids):
    k = centroids.shape[0]
    counts = np.bincount(labels, minlength=k)
    sums = np.zeros((k, 3), dtype=np.float64)
    np.add.at(sums, labels, samples)
    out = centroids.copy()
    filled = counts > 0
    # empty clusters keep their previous centroid
    out[filled] = sums[filled] / counts[filled, None]
    return out


def kmeans_rgb(samples, k, max_iterations=100, rng=None, seed=None):
    """
    Cluster RGB samples into at most k colors.

    Args:
        samples: (N, 3) array of channel values in 0..255, N >= 1
        k: requested number of clusters, clamped to N
        max_iterations: cap on assignment/update rounds
        rng: numpy Generator (or any object with integers()/random()) used for seeding
        seed: used to build a Generator when rng is not given

    Returns:
        ClusterResult. Centroids that ended up with no samples are kept with count 0.

    Raises:
        ValueError: invalid k, max_iterations or samples
    """
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k <= 0:
        raise ValueError(f"k must be a positive integer, got {k!r}")
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, (int, np.integer)) or max_iterations < 1:
        raise ValueError(f"max_iterations must be a positive integer, got {max_iterations!r}")
    X = _check_samples(samples)
    if rng is None:
        rng = np.random.default_rng(seed)

    k_eff = min(int(k), X.shape[0])
    centroids = seed_centroids(X, k_eff, rng)
    logger.debug(f"Seeded {k_eff} centroids from {X.shape[0]} samples (requested k={k})")

    # no previous assignment yet, so the first round always counts as a change
    labels = np.full(X.shape[0], -1, dtype=np.int64)
    converged = False
    iterations = 0
    for iterations in range(1, max_iterations + 1):
        new_labels = assign_samples(X, centroids)
        changed = bool((new_labels != labels).any())
        labels = new_labels
        if not changed:
            converged = True
            break
        centroids = update_centroids(X, labels, centroids)

    counts = np.bincount(labels, minlength=k_eff)
    if converged:
        logger.debug(f"K-means converged after {iterations} iterations")
    else:
        logger.info(f"K-means stopped at the iteration cap ({max_iterations}) without converging")
    return ClusterResult(centroids=centroids, labels=labels, counts=counts,
                         iterations=iterations, converged=converged)
