"""
=============================================================================
INTEGER <-> STATUS CODE CONVERSION
=============================================================================

    ┌──────────────┐  from_integer()          ┌──────────────────────────┐
    │  int         │ ───────────────────────► │ StatusCode.<NAME>        │
    │  (any width) │                          │ UnknownStatusCode(v)     │
    └──────────────┘ ◄─────────────────────── └──────────────────────────┘
                        to_integer()

    ┌──────────────┐  from_optional_integer() ┌──────────────────────────┐
    │ None         │ ───────────────────────► │ StatusCode.NONE          │
    └──────────────┘ ◄─────────────────────── └──────────────────────────┘
                        to_optional_integer()

Every conversion is total: an unregistered number is returned as
UnknownStatusCode, never raised as an error.

=============================================================================
INTEGER WIDTH
=============================================================================

Status codes travel as unsigned 32-bit values. Input of any width is
reduced to 32 bits (two's complement) BEFORE the lookup:

    from_integer(404)            -> StatusCode.NOT_FOUND
    from_integer(2**32 + 404)    -> StatusCode.NOT_FOUND
    from_integer(-1)             -> UnknownStatusCode(4294967295)

Pass ConversionConfig(wrap_out_of_range=False) to reject such input with
StatusCodeError instead.

=============================================================================
"""

import logging
import operator
from typing import Optional

from .config import DEFAULT_CONFIG, ConversionConfig
from .status_codes import HttpCode, StatusCode, UnknownStatusCode, lookup


logger = logging.getLogger(__name__)

U32_MAX = 0xFFFFFFFF


class StatusCodeError(ValueError):
    """
    Raised when strict conversion refuses an integer.

    Only raised when wrap_out_of_range is disabled; the default
    conversion never fails on integer input.
    """

    def __init__(self, message: str, value: int):
        super().__init__(message)
        self.value = value


def _to_u32(value: int, config: ConversionConfig) -> int:
    if 0 <= value <= U32_MAX:
        return value
    if not config.wrap_out_of_range:
        raise StatusCodeError(
            f"Status code {value} is outside the unsigned 32-bit range", value
        )
    return value & U32_MAX


def from_integer(value: int, config: Optional[ConversionConfig] = None) -> HttpCode:
    """
    Convert an integer into a status code.

    Accepts int and anything implementing __index__ (http.HTTPStatus,
    another StatusCode). Non-integral input such as "404" or 404.0
    raises TypeError.

    Returns:
        The known StatusCode member, or UnknownStatusCode carrying the
        32-bit value. Never StatusCode.NONE: 0 is an unknown code here.
    """
    config = config or DEFAULT_CONFIG
    raw = _to_u32(int(operator.index(value)), config)

    code = lookup(raw)
    if code is not None:
        return code

    if config.log_unknown:
        logger.debug(f"Unrecognized status code {raw}")
    return UnknownStatusCode(raw)


def from_optional_integer(
    value: Optional[int], config: Optional[ConversionConfig] = None
) -> HttpCode:
    """None yields StatusCode.NONE; anything else goes through from_integer()."""
    if value is None:
        return StatusCode.NONE
    return from_integer(value, config)


def to_integer(code: HttpCode) -> int:
    """
    Convert a status code back to its unsigned 32-bit integer.

    StatusCode.NONE converts to 0, which is reserved for absence and is
    never a registered code.
    """
    if isinstance(code, UnknownStatusCode):
        return code.value
    if isinstance(code, StatusCode):
        return code.value
    raise TypeError(
        f"Expected StatusCode or UnknownStatusCode, got {type(code).__name__}"
    )


def to_optional_integer(code: HttpCode) -> Optional[int]:
    if code is StatusCode.NONE:
        return None
    return to_integer(code)


def default() -> HttpCode:
    """The value of a status code that has not been set yet."""
    return StatusCode.NONE
