"""
=============================================================================
CONVERSION CONFIGURATION
=============================================================================

Options for turning raw integers into status codes.

The defaults reproduce plain two's-complement truncation: any Python
integer is accepted and reduced to 32 bits before lookup. Stricter callers
can opt out per call:

    config = ConversionConfig(wrap_out_of_range=False)
    from_integer(-1, config)        # raises StatusCodeError

Configuration is always passed explicitly. There is no module-level default
object to mutate, and nothing is read from the environment, so two callers
with different needs never interfere.

=============================================================================
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionConfig:
    """
    Configuration for integer to status code conversion.

    =========================================================================
    OPTIONS
    =========================================================================

    wrap_out_of_range
        True (default): values outside [0, 2**32 - 1] are truncated to
        32 bits, so -1 becomes UnknownStatusCode(4294967295).
        False: such values raise StatusCodeError instead.

    log_unknown
        Emit a DEBUG record on the "httpcodex" logger each time a
        conversion yields an UnknownStatusCode.

    =========================================================================
    """

    wrap_out_of_range: bool = True
    log_unknown: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Fail fast on values that are not real booleans."""
        if not isinstance(self.wrap_out_of_range, bool):
            raise ValueError(
                f"wrap_out_of_range must be a bool, got {self.wrap_out_of_range!r}"
            )

        if not isinstance(self.log_unknown, bool):
            raise ValueError(f"log_unknown must be a bool, got {self.log_unknown!r}")


DEFAULT_CONFIG = ConversionConfig()
