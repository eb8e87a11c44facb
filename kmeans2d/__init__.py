"""Lloyd's K-means clustering of 2D points."""
__version__ = '0.1.0'

from .engine import KMeans, KMeansResult, fit
from .errors import ConfigError, DataError, KMeansError, OutputError
from .group import Group
from .point import Point

__all__ = [
    'KMeans', 'KMeansResult', 'fit', 'Group', 'Point',
    'KMeansError', 'ConfigError', 'DataError', 'OutputError',
]
