"""
=============================================================================
HTTPCODEX - TYPED HTTP STATUS CODES
=============================================================================

Named HTTP status codes with total, lossless conversion to and from
integers, and classification into status classes.

    >>> from httpcodex import from_integer, StatusCode, StatusClass
    >>> from_integer(404)
    <StatusCode.NOT_FOUND: 404>
    >>> from_integer(999)
    UnknownStatusCode(value=999)
    >>> from_integer(503).status_class
    <StatusClass.SERVER_ERROR: 'server_error'>

Nothing here performs I/O or keeps state; every function is safe to call
from any thread.

=============================================================================
"""

__version__ = "1.0.0"

from .config import ConversionConfig
from .conversion import (
    StatusCodeError,
    default,
    from_integer,
    from_optional_integer,
    to_integer,
    to_optional_integer,
)
from .status_codes import (
    HttpCode,
    StatusClass,
    StatusCode,
    UnknownStatusCode,
    classify,
    known_codes,
)

# Public API - what you get when you do:
# from httpcodex import *
__all__ = [
    # Types
    "HttpCode",
    "StatusCode",
    "UnknownStatusCode",
    "StatusClass",

    # Conversion
    "from_integer",
    "from_optional_integer",
    "to_integer",
    "to_optional_integer",
    "default",
    "classify",
    "known_codes",

    # Configuration and errors
    "ConversionConfig",
    "StatusCodeError",

    "__version__",
]
