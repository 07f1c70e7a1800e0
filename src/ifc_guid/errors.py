"""Structured conversion failures.

Every parse path returns one of these instead of raising, so a malformed
identifier never aborts the caller. The ``source`` field names the primitive
that rejected the input; errors are passed upward unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Why a conversion was rejected.

    INVALID_LENGTH: input is not the fixed width of its representation
    INVALID_SYMBOL: a character is outside the representation's alphabet
    OVERFLOW: the value needs more than 128 bits
    UNPOPULATED: a render was requested before any value was loaded
    """

    INVALID_LENGTH = "invalid_length"
    INVALID_SYMBOL = "invalid_symbol"
    OVERFLOW = "overflow"
    UNPOPULATED = "unpopulated"


@dataclass(frozen=True)
class ConversionError:
    """A single rejected conversion."""

    kind: ErrorKind
    source: str  # primitive that rejected the input, e.g. "ifc_to_bin"
    message: str
    value: object = None

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


def reject(kind: ErrorKind, source: str, message: str, value: object = None) -> ConversionError:
    """Build a ConversionError and note it at debug level."""
    logger.debug("%s rejected %r (%s): %s", source, value, kind.value, message)
    return ConversionError(kind=kind, source=source, message=message, value=value)
