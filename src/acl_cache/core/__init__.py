"""Core module for acl-cache.

Only exports exceptions and value objects; entities live under features/.
"""

from .exceptions import *
from .value_objects import *
from .exceptions import __all__ as _exceptions_all
from .value_objects import __all__ as _value_objects_all

__all__ = [*_exceptions_all, *_value_objects_all]
