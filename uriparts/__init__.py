from . import parser
from .parser import *  # NOQA

from ._version import __version__  # NOQA

__all__ = parser.__all__ + ('__version__',)  # NOQA
