"""
=============================================================================
HTTP STATUS CODES AS TYPED VALUES
=============================================================================

This module defines the registry of known HTTP status codes and the
coarser status classes derived from them.

=============================================================================
THE VARIANT TYPE
=============================================================================

A status code is one of three things:

    ┌────────────────────────────────────────────────────────────────────┐
    │                        HttpCode VARIANTS                           │
    ├──────────────────────────┬─────────────────────────────────────────┤
    │  StatusCode.<NAME>       │ A known, registered code (100-511)     │
    │                          │                                         │
    │  StatusCode.NONE         │ No code present (integer form: 0)      │
    │                          │                                         │
    │  UnknownStatusCode(v)    │ Any other number, kept as data         │
    └──────────────────────────┴─────────────────────────────────────────┘

Unknown codes are never rejected. A server may send 299 or 799 tomorrow;
the value is carried along so callers can decide what to do with it.

=============================================================================
STATUS CLASSES
=============================================================================

    ┌────────┬───────────────────────────────────────────────────────────┐
    │  1xx   │ INFORMATIONAL: Request received, continuing process      │
    │  2xx   │ SUCCESSFUL: Request received, understood, accepted       │
    │  3xx   │ REDIRECTION: Further action needed                       │
    │  4xx   │ CLIENT_ERROR: Problem with the request                   │
    │  5xx   │ SERVER_ERROR: Problem with the server                    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  -     │ NONE: No code received                                   │
    │  -     │ UNKNOWN: Code not in the registry                        │
    └────────┴───────────────────────────────────────────────────────────┘

An unknown code is classified UNKNOWN even when its hundreds digit looks
familiar: 299 is not assumed to be a success.

=============================================================================
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union


class StatusClass(Enum):
    """HTTP status classes, so comparing a code's hundreds is not necessary."""

    INFORMATIONAL = "informational"
    SUCCESSFUL = "successful"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    NONE = "none"
    UNKNOWN = "unknown"

    @property
    def is_error(self) -> bool:
        """True for CLIENT_ERROR and SERVER_ERROR."""
        return self in (StatusClass.CLIENT_ERROR, StatusClass.SERVER_ERROR)


class _ClassifiedMixin:
    """
    Predicates shared by StatusCode and UnknownStatusCode.

    Both variants answer through classify(), so an unknown 404-looking
    number never reports itself as a client error.
    """

    @property
    def status_class(self) -> StatusClass:
        return classify(self)

    @property
    def is_informational(self) -> bool:
        """Check if this is a 1xx (informational) status code."""
        return self.status_class is StatusClass.INFORMATIONAL

    @property
    def is_success(self) -> bool:
        """Check if this is a 2xx (success) status code."""
        return self.status_class is StatusClass.SUCCESSFUL

    @property
    def is_redirect(self) -> bool:
        """Check if this is a 3xx (redirection) status code."""
        return self.status_class is StatusClass.REDIRECTION

    @property
    def is_client_error(self) -> bool:
        """Check if this is a 4xx (client error) status code."""
        return self.status_class is StatusClass.CLIENT_ERROR

    @property
    def is_server_error(self) -> bool:
        """Check if this is a 5xx (server error) status code."""
        return self.status_class is StatusClass.SERVER_ERROR

    @property
    def is_error(self) -> bool:
        """
        Check if this is an error status code (4xx or 5xx).

        Useful for logging and error handling.
        """
        return self.status_class.is_error


class StatusCode(_ClassifiedMixin, IntEnum):
    """
    Known HTTP status codes, plus the NONE sentinel.

    This enum extends IntEnum, so members compare equal to integers:

        >>> StatusCode.NOT_FOUND
        <StatusCode.NOT_FOUND: 404>
        >>> StatusCode.NOT_FOUND == 404
        True
        >>> StatusCode.NOT_FOUND.status_class
        <StatusClass.CLIENT_ERROR: 'client_error'>

    Do not build members with StatusCode(value): use from_integer(),
    which never raises for unregistered numbers and never turns 0 into
    NONE.
    """

    # =========================================================================
    # 1xx INFORMATIONAL
    # =========================================================================
    #
    CONTINUE = 100               # Continue the request, or ignore if finished
    SWITCHING_PROTOCOLS = 101    # Answer to an Upgrade request header
    PROCESSING = 102             # WebDAV: received, no response available yet
    EARLY_HINTS = 103            # Used with Link to let the agent preload

    # =========================================================================
    # 2xx SUCCESSFUL
    # =========================================================================
    #
    OK = 200                                # Request succeeded
    CREATED = 201                           # New resource created (POST, some PUT)
    ACCEPTED = 202                          # Received, not yet acted upon
    NON_AUTHORITATIVE_INFORMATION = 203     # Metadata from a local or third-party copy
    NO_CONTENT = 204                        # Nothing to send, headers may be useful
    RESET_CONTENT = 205                     # Reset the document that sent this
    PARTIAL_CONTENT = 206                   # Answer to a Range request
    MULTI_STATUS = 207                      # WebDAV: several resources, several statuses
    ALREADY_REPORTED = 208                  # WebDAV: inside <dav:propstat>
    IM_USED = 226                           # HTTP delta encoding applied to a GET

    # =========================================================================
    # 3xx REDIRECTION
    # =========================================================================
    #
    MULTIPLE_CHOICES = 300      # More than one possible response
    MOVED_PERMANENTLY = 301     # URL changed permanently, new URL given
    FOUND = 302                 # URL changed temporarily
    SEE_OTHER = 303             # GET the resource at another URI
    NOT_MODIFIED = 304          # Cached version is still valid
    TEMPORARY_REDIRECT = 307    # Like 302 but the method must not change
    PERMANENT_REDIRECT = 308    # Like 301 but the method must not change

    # =========================================================================
    # 4xx CLIENT ERROR
    # =========================================================================
    #
    BAD_REQUEST = 400                       # Malformed request syntax
    UNAUTHORIZED = 401                      # Unauthenticated
    PAYMENT_REQUIRED = 402                  # Experimental, reserved
    FORBIDDEN = 403                         # Known client, no access rights
    NOT_FOUND = 404                         # Resource cannot be found
    METHOD_NOT_ALLOWED = 405                # Method not supported by the resource
    NOT_ACCEPTABLE = 406                    # Nothing matches content negotiation
    PROXY_AUTHENTICATION_REQUIRED = 407     # Like 401, for a proxy
    REQUEST_TIMEOUT = 408                   # Idle connection shut down
    CONFLICT = 409                          # Conflicts with current resource state
    GONE = 410                              # Permanently deleted, no forwarding
    LENGTH_REQUIRED = 411                   # Content-Length header required
    PRECONDITION_FAILED = 412               # Conditional headers not met
    PAYLOAD_TOO_LARGE = 413                 # Body larger than the server allows
    URI_TOO_LONG = 414                      # URI longer than the server will read
    UNSUPPORTED_MEDIA_TYPE = 415            # Media format not supported
    RANGE_NOT_SATISFIABLE = 416             # Range outside the target data
    EXPECTATION_FAILED = 417                # Expect header cannot be met
    IM_A_TEAPOT = 418                       # Refuses to brew coffee (RFC 2324)
    MISDIRECTED_REQUEST = 421               # Server cannot answer for this origin
    UNPROCESSABLE_CONTENT = 422             # WebDAV: well-formed, semantic errors
    LOCKED = 423                            # WebDAV: resource locked
    FAILED_DEPENDENCY = 424                 # WebDAV: a previous request failed
    TOO_EARLY = 425                         # Experimental: may be replayed
    UPGRADE_REQUIRED = 426                  # Switch to a different protocol
    PRECONDITION_REQUIRED = 428             # Request must be conditional
    TOO_MANY_REQUESTS = 429                 # Rate limited
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431   # Header fields too large
    UNAVAILABLE_FOR_LEGAL_REASONS = 451     # Censored, court order

    # =========================================================================
    # 5xx SERVER ERROR
    # =========================================================================
    #
    INTERNAL_SERVER_ERROR = 500             # Unexpected condition
    NOT_IMPLEMENTED = 501                   # Method not supported by the server
    BAD_GATEWAY = 502                       # Invalid response from upstream
    SERVICE_UNAVAILABLE = 503               # Down for maintenance or overloaded
    GATEWAY_TIMEOUT = 504                   # Upstream did not answer in time
    HTTP_VERSION_NOT_SUPPORTED = 505        # HTTP version not supported
    VARIANT_ALSO_NEGOTIATES = 506           # Circular content negotiation
    INSUFFICIENT_STORAGE = 507              # WebDAV: cannot store representation
    LOOP_DETECTED = 508                     # WebDAV: infinite loop
    NOT_EXTENDED = 510                      # Further extensions required
    NETWORK_AUTHENTICATION_REQUIRED = 511   # Authenticate to gain network access

    # =========================================================================
    # SENTINEL
    # =========================================================================
    #
    NONE = 0                    # No code was given; 0 is reserved for absence

    @property
    def is_known(self) -> bool:
        return self is not StatusCode.NONE


@dataclass(frozen=True)
class UnknownStatusCode(_ClassifiedMixin):
    """
    A code was given but is not in the registry.

    `value` is the unsigned 32-bit form of what the caller passed in.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError(
                f"Status code value must be an int, got {type(self.value).__name__}"
            )
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(
                f"Status code {self.value} is outside the unsigned 32-bit range"
            )

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    @property
    def is_known(self) -> bool:
        return False


HttpCode = Union[StatusCode, UnknownStatusCode]


# =============================================================================
# LOOKUP TABLES
# =============================================================================
#
# Built once at import and never mutated.
#
#   integer ──_KNOWN_CODES──► StatusCode
#   StatusCode.value ──// 100──► _CLASS_BY_HUNDREDS ──► StatusClass
#
# =============================================================================

_KNOWN_CODES = {
    member.value: member
    for member in StatusCode
    if member is not StatusCode.NONE
}

_CLASS_BY_HUNDREDS = {
    1: StatusClass.INFORMATIONAL,
    2: StatusClass.SUCCESSFUL,
    3: StatusClass.REDIRECTION,
    4: StatusClass.CLIENT_ERROR,
    5: StatusClass.SERVER_ERROR,
}


def lookup(value: int) -> Optional[StatusCode]:
    """Return the known member for `value`, or None if it is not registered."""
    return _KNOWN_CODES.get(value)


def known_codes() -> Tuple[StatusCode, ...]:
    """All registered members in ascending numeric order, NONE excluded."""
    return tuple(_KNOWN_CODES[value] for value in sorted(_KNOWN_CODES))


def classify(code: HttpCode) -> StatusClass:
    """
    Derive the StatusClass of a code.

    Known members map by their hundreds digit. NONE maps to NONE and every
    UnknownStatusCode maps to UNKNOWN, whatever number it carries.
    """
    if isinstance(code, UnknownStatusCode):
        return StatusClass.UNKNOWN
    if code is StatusCode.NONE:
        return StatusClass.NONE
    if not isinstance(code, StatusCode):
        raise TypeError(
            f"Expected StatusCode or UnknownStatusCode, got {type(code).__name__}"
        )
    return _CLASS_BY_HUNDREDS[code.value // 100]
