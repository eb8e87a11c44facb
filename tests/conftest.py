import logging

import matplotlib

matplotlib.use('Agg')

import pytest

from kmeans2d.engine import KMeans

EXAMPLE_RECORDS = [(1, 0.0, 0.0), (2, 1.0, 0.0), (3, 10.0, 10.0), (4, 11.0, 10.0)]


@pytest.fixture
def example_records():
    return list(EXAMPLE_RECORDS)


@pytest.fixture
def example_engine():
    return KMeans.from_points(EXAMPLE_RECORDS, 2)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / 'points.txt'
    path.write_text(''.join('%d %g %g\n' % r for r in EXAMPLE_RECORDS))
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('kmeans2d')
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
