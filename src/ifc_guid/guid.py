"""128-bit identifier value and the stateful IfcGuid converter.

Guid128 is the immutable value: exactly 128 binary digits, most significant
bit first. All representations (GUID, hex, IFC GlobalId, decimal) are views
of it. IfcGuid wraps one optional Guid128 and renders it on demand.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ifc_guid.codec import (
    BIT_LENGTH,
    DEC_DIGITS,
    HEX_LENGTH,
    bin_to_hex,
    bin_to_ifc,
    check_bin,
    hex_to_bin,
    ifc_to_bin,
    prepend_bin,
    split_guid,
)
from ifc_guid.errors import ConversionError, ErrorKind, reject


class Guid128(BaseModel):
    """A 128-bit identifier stored as a binary digit string.

    Construct it through the ``from_*`` factories, which return a
    ConversionError instead of raising on malformed input.
    """

    model_config = ConfigDict(frozen=True)

    bits: str = Field(description="128 binary digits, most significant bit first")

    @field_validator("bits")
    @classmethod
    def exactly_128_binary_digits(cls, v: str) -> str:
        error = check_bin(v, source="Guid128")
        if error is not None:
            raise ValueError(error.message)
        return v

    # -- factories ---------------------------------------------------------

    @classmethod
    def from_bin(cls, bits: str) -> Guid128 | ConversionError:
        error = check_bin(bits)
        if error is not None:
            return error
        return cls(bits=bits)

    @classmethod
    def from_hex(cls, hex_str: str) -> Guid128 | ConversionError:
        """Load 32 hex digits (any case, no separators)."""
        if len(hex_str) != HEX_LENGTH:
            return reject(
                ErrorKind.INVALID_LENGTH, "from_hex",
                f"hex GUID must be {HEX_LENGTH} characters, got {len(hex_str)}", hex_str,
            )
        bits = hex_to_bin(hex_str)
        if isinstance(bits, ConversionError):
            return bits
        return cls(bits=bits)

    @classmethod
    def from_guid(cls, guid: str) -> Guid128 | ConversionError:
        """Load a GUID, ignoring hyphens and spaces."""
        return cls.from_hex(guid.replace("-", "").replace(" ", ""))

    @classmethod
    def from_ifc(cls, ifc: str) -> Guid128 | ConversionError:
        bits = ifc_to_bin(ifc)
        if isinstance(bits, ConversionError):
            return bits
        return cls(bits=bits)

    @classmethod
    def from_int(cls, value: int, source: str = "from_int") -> Guid128 | ConversionError:
        if value < 0:
            return reject(
                ErrorKind.INVALID_SYMBOL, source,
                "value must be non-negative", value,
            )
        if value.bit_length() > BIT_LENGTH:
            return reject(
                ErrorKind.OVERFLOW, source,
                f"value needs {value.bit_length()} bits, maximum is {BIT_LENGTH}", value,
            )
        return cls(bits=prepend_bin(format(value, "b")))

    @classmethod
    def from_dec(cls, dec: str) -> Guid128 | ConversionError:
        """Load an unsigned base-10 integer string (up to 39 digits)."""
        if not dec:
            return reject(ErrorKind.INVALID_LENGTH, "from_dec", "decimal string is empty", dec)
        if not (dec.isascii() and dec.isdigit()):
            return reject(
                ErrorKind.INVALID_SYMBOL, "from_dec",
                f"{dec!r} is not an unsigned decimal integer", dec,
            )
        digits = dec.lstrip("0") or "0"
        if len(digits) > DEC_DIGITS:
            return reject(
                ErrorKind.OVERFLOW, "from_dec",
                f"decimal value has {len(digits)} digits, maximum is {DEC_DIGITS}", dec,
            )
        return cls.from_int(int(digits), source="from_dec")

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> Guid128 | ConversionError:
        return cls.from_hex(value.hex)

    # -- renderers ---------------------------------------------------------

    def to_int(self) -> int:
        return int(self.bits, 2)

    def to_bin(self) -> str:
        return self.bits

    def to_hex(self) -> str:
        return bin_to_hex(self.bits)

    def to_guid(self, separator: str = "-") -> str:
        """Hex grouped 8-4-4-4-12, joined by ``separator``."""
        return split_guid(self.to_hex(), separator)

    def to_ifc(self) -> str:
        return bin_to_ifc(self.bits)

    def to_dec(self) -> str:
        return str(self.to_int())

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(hex=self.to_hex())

    def __str__(self) -> str:
        return self.to_ifc()


class IfcGuid:
    """Converter holding at most one identifier.

    Starts empty. Each successful ``from_*`` call replaces the held value and
    returns ``self`` for chaining; a failed call returns the ConversionError
    and leaves the previous value untouched. ``to_*`` calls on an empty
    converter return an UNPOPULATED error.

    Not safe to share between threads without locking, since ``from_*``
    mutates the instance.

    Example:
        >>> IfcGuid().from_guid("01cf62c8-e9bc-bf88-0000-000000000005").to_ifc()
        '01psB8wRo$Y00000000005'
    """

    def __init__(self) -> None:
        self.value: Guid128 | None = None

    def __repr__(self) -> str:
        if self.value is None:
            return "IfcGuid(<empty>)"
        return f"IfcGuid('{self.value.to_ifc()}')"

    @property
    def is_populated(self) -> bool:
        return self.value is not None

    def _load(self, result: Guid128 | ConversionError) -> IfcGuid | ConversionError:
        if isinstance(result, ConversionError):
            return result
        self.value = result
        return self

    def from_guid(self, guid: str) -> IfcGuid | ConversionError:
        return self._load(Guid128.from_guid(guid))

    def from_hex(self, hex_str: str) -> IfcGuid | ConversionError:
        return self._load(Guid128.from_hex(hex_str))

    def from_ifc(self, ifc: str) -> IfcGuid | ConversionError:
        return self._load(Guid128.from_ifc(ifc))

    def from_bin(self, bits: str) -> IfcGuid | ConversionError:
        return self._load(Guid128.from_bin(bits))

    def from_dec(self, dec: str) -> IfcGuid | ConversionError:
        return self._load(Guid128.from_dec(dec))

    def from_uuid(self, value: uuid.UUID) -> IfcGuid | ConversionError:
        return self._load(Guid128.from_uuid(value))

    def from_value(self, value: Guid128) -> IfcGuid:
        self.value = value
        return self

    def _unpopulated(self, source: str) -> ConversionError:
        return reject(ErrorKind.UNPOPULATED, source, "no identifier has been loaded", None)

    def to_guid(self, separator: str = "-") -> str | ConversionError:
        if self.value is None:
            return self._unpopulated("to_guid")
        return self.value.to_guid(separator)

    def to_hex(self) -> str | ConversionError:
        if self.value is None:
            return self._unpopulated("to_hex")
        return self.value.to_hex()

    def to_bin(self) -> str | ConversionError:
        if self.value is None:
            return self._unpopulated("to_bin")
        return self.value.to_bin()

    def to_ifc(self) -> str | ConversionError:
        if self.value is None:
            return self._unpopulated("to_ifc")
        return self.value.to_ifc()

    def to_dec(self) -> str | ConversionError:
        if self.value is None:
            return self._unpopulated("to_dec")
        return self.value.to_dec()

    def to_uuid(self) -> uuid.UUID | ConversionError:
        if self.value is None:
            return self._unpopulated("to_uuid")
        return self.value.to_uuid()
