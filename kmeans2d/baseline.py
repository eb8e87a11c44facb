"""
Compare the engine against scikit-learn and scipy K-means.

All three start from the same centers (the first K points) so that on
well-separated data they should agree on the final partition.
"""
import logging
import time
import warnings
from dataclasses import dataclass

import numpy as np
import scipy.cluster.vq
import sklearn.cluster

from .engine import DEFAULT_MAX_ITER, KMeans

logger = logging.getLogger(__name__)


@dataclass
class BaselineRun:
    name: str
    labels: np.ndarray
    centers: np.ndarray
    elapsed_ms: float


def _sklearn(data, init, max_iter):
    start = time.time()
    kmeans = sklearn.cluster.KMeans(len(init), init=init, n_init=1, max_iter=max_iter,
                                    tol=0.0, algorithm='lloyd')
    labels = kmeans.fit_predict(data)
    elapsed = (time.time() - start) * 1000
    return BaselineRun('sklearn', labels + 1, kmeans.cluster_centers_, elapsed)


def _scipy(data, init, max_iter):
    start = time.time()
    with warnings.catch_warnings():
        # an emptied cluster keeps its old center here as in the engine
        warnings.simplefilter('ignore', UserWarning)
        centers, labels = scipy.cluster.vq.kmeans2(data, init, iter=max_iter, minit='matrix',
                                                   missing='warn')
    elapsed = (time.time() - start) * 1000
    return BaselineRun('scipy', labels + 1, centers, elapsed)


def compare(records, k, max_iter=DEFAULT_MAX_ITER):
    """Run all three implementations on ``records``.

    Returns ``(runs, agree)`` where ``runs`` starts with the engine's own run
    and ``agree`` maps each baseline name to whether its labels match.
    """
    engine = KMeans.from_points(records, k, max_iter=max_iter)
    result = engine.run()
    runs = [BaselineRun('kmeans2d', result.labels, result.centers, result.elapsed_ms)]

    data = result.data
    init = data[:k].copy()
    runs.append(_sklearn(data, init, max_iter))
    runs.append(_scipy(data, init, max_iter))

    agree = {}
    for run in runs[1:]:
        agree[run.name] = bool(np.array_equal(run.labels, result.labels))
        if not agree[run.name]:
            logger.warning('%s labels differ from kmeans2d on %d points', run.name,
                           int(np.sum(run.labels != result.labels)))
    return runs, agree


def format_comparison(runs, agree):
    lines = []
    for run in runs:
        status = '' if run.name not in agree else ('  agree' if agree[run.name] else '  DIFFER')
        lines.append('%-9s %.4f ms%s' % (run.name, run.elapsed_ms, status))
    return '\n'.join(lines)
