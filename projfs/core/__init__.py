"""Core functionality for projfs."""

from . import config
from . import inputs
from . import paths
from . import directories
from . import files

__all__ = ['config', 'inputs', 'paths', 'directories', 'files']
