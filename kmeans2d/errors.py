class KMeansError(Exception):
    """Base class for every error raised by kmeans2d."""


class ConfigError(KMeansError, ValueError):
    """Invalid run parameters (K, max_iter)."""


class DataError(KMeansError):
    """Input points missing, unreadable, empty or malformed."""


class OutputError(KMeansError, OSError):
    """A result report could not be written."""
