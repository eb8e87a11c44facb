import logging

import numpy as np
import sklearn.datasets

from .errors import ConfigError, OutputError

logger = logging.getLogger(__name__)


def make_dataset(n, k, seed=None, cluster_std=1.0):
    """Generate ``n`` 2D points around ``k`` blob centers.

    Returns ``(data, labels)`` where labels are the generating blob (0-based).
    """
    if n < 1 or k < 1:
        raise ConfigError('n and k must be positive, got n=%r k=%r' % (n, k))
    data, labels = sklearn.datasets.make_blobs(
        n_samples=n, n_features=2, centers=k, cluster_std=cluster_std, random_state=seed)
    return data, labels


def write_points(path, data):
    """Write ``data`` as ``<index> <x> <y>`` records with 1-based indices."""
    data = np.asarray(data, dtype=float)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            for i, (x, y) in enumerate(data, start=1):
                print(i, repr(float(x)), repr(float(y)), file=f)
    except OSError as e:
        raise OutputError('Unable to write %s: %s' % (path, e)) from e
    logger.info('Wrote %d points to %s', len(data), path)
