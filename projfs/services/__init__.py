"""Services that reach beyond plain filesystem calls."""

from . import zip_process
from . import modules

__all__ = ['zip_process', 'modules']
