"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import case
from . import text
from . import substitution
from . import truncation
from . import slugs
from . import patterns
from .case import *
from .text import *
from .substitution import *
from .truncation import *
from .slugs import *
from .errors import InvalidArgument

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'case',
    'text',
    'substitution',
    'truncation',
    'slugs',
    'patterns',
    'InvalidArgument',
    *case.__all__,
    *text.__all__,
    *substitution.__all__,
    *truncation.__all__,
    *slugs.__all__
]
