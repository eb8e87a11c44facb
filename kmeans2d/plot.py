import logging

import matplotlib.pyplot as plot
import numpy as np

from .errors import DataError
from .io import TABLE_HEADER, TABLE_RULE

logger = logging.getLogger(__name__)


def read_result_table(path):
    """Read a saved result table back into ``(ids, data, labels)`` arrays."""
    ids, data, labels = [], [], []
    try:
        with open(path, encoding='utf-8') as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line or line == TABLE_RULE or line == TABLE_HEADER:
                    continue
                cells = [c.strip() for c in line.strip('|').split('|')]
                try:
                    if len(cells) != 4:
                        raise ValueError('expected 4 columns, got %d' % len(cells))
                    ids.append(int(cells[0]))
                    data.append((float(cells[1]), float(cells[2])))
                    labels.append(int(cells[3]))
                except ValueError as e:
                    raise DataError('Bad row %d in %s (%s): %r' % (lineno, path, e, line)) from e
    except OSError as e:
        raise DataError('Unable to read %s: %s' % (path, e)) from e
    if not ids:
        raise DataError('No result rows in %s' % path)
    return np.array(ids), np.array(data), np.array(labels)


def label_means(data, labels):
    """Center of every label present, in ascending label order."""
    return np.array([data[labels == label].mean(axis=0) for label in np.unique(labels)])


def plot_result(data, labels, means=None, save=None, show=False):
    data = np.asarray(data)
    if means is None:
        means = label_means(data, labels)
    means = np.asarray(means)

    fig, ax = plot.subplots()
    ax.scatter(data[:, 0], data[:, 1], c=labels)
    ax.scatter(means[:, 0], means[:, 1], linewidths=2, marker='x', c='r')
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    if save:
        fig.savefig(save)
        logger.info('Saved plot to %s', save)
    if show:
        plot.show()
    return fig
