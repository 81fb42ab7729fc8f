"""Configuration settings."""
from importlib.metadata import version
from importlib.metadata import PackageNotFoundError
from warnings import warn

DEFAULT_LEVEL_OF_PARALLELISM = -1


def get_version():
    _version = 'unknown'
    try:
        _version = version('motifminer')
    except PackageNotFoundError:
        warn('motifminer package is used but not installed.')
    return _version
