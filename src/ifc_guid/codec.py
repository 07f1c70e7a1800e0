"""Stateless conversions between binary, hex and IFC GlobalId strings.

IFC compresses a 128-bit GUID into 22 characters of a 64-symbol alphabet.
The encoding is asymmetric: the first character carries only the top 2 bits,
the remaining 21 characters carry 6 bits each (2 + 21 * 6 = 128).

Every function here is pure and safe to call from any thread. Malformed input
is returned as a ConversionError value, never raised.
"""

from __future__ import annotations

from ifc_guid.errors import ConversionError, ErrorKind, reject

IFC_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_$"
HEX_ALPHABET = "0123456789abcdef"

BIT_LENGTH = 128
HEX_LENGTH = 32
IFC_LENGTH = 22
HEAD_BITS = 2
SYMBOL_BITS = 6
NIBBLE_BITS = 4
DEC_DIGITS = len(str(2**BIT_LENGTH - 1))
GUID_GROUPS = (8, 4, 4, 4, 12)


def _first_non_binary(bits: str) -> int:
    """Index of the first character that is not 0/1, or -1."""
    for i, char in enumerate(bits):
        if char not in "01":
            return i
    return -1


def prepend_bin(bits: str, length: int = BIT_LENGTH) -> str:
    """Left-pad a binary string with zeros up to ``length``.

    Only pads: a string already at or beyond ``length`` is returned as is.
    """
    if len(bits) >= length:
        return bits
    return "0" * (length - len(bits)) + bits


def check_bin(bits: str, source: str = "validate_bin") -> ConversionError | None:
    """Return the reason ``bits`` is not a valid 128-bit string, or None."""
    if len(bits) != BIT_LENGTH:
        return reject(
            ErrorKind.INVALID_LENGTH, source,
            f"binary string must be {BIT_LENGTH} characters, got {len(bits)}", bits,
        )
    bad = _first_non_binary(bits)
    if bad >= 0:
        return reject(
            ErrorKind.INVALID_SYMBOL, source,
            f"character {bits[bad]!r} at position {bad} is not 0 or 1", bits,
        )
    return None


def validate_bin(bits: str) -> bool:
    """True if ``bits`` is exactly 128 characters of 0/1."""
    return check_bin(bits) is None


def hex_to_bin(hex_str: str) -> str | ConversionError:
    """Convert hex digits to a binary string, 4 bits per digit.

    Case-insensitive. 32 hex digits always give exactly 128 bits.
    """
    nibbles: list[str] = []
    for char in reversed(hex_str.lower()):
        index = HEX_ALPHABET.find(char)
        if index < 0:
            return reject(
                ErrorKind.INVALID_SYMBOL, "hex_to_bin",
                f"character {char!r} is not a hex digit", hex_str,
            )
        nibbles.append(prepend_bin(format(index, "b"), NIBBLE_BITS))
    return "".join(reversed(nibbles))


def bin_to_hex(bits: str) -> str | ConversionError:
    """Convert a binary string of any length to lower-case hex.

    Input whose length is not a multiple of 4 is zero-padded on the left first.
    """
    bad = _first_non_binary(bits)
    if bad >= 0:
        return reject(
            ErrorKind.INVALID_SYMBOL, "bin_to_hex",
            f"character {bits[bad]!r} at position {bad} is not 0 or 1", bits,
        )
    rest = len(bits) % NIBBLE_BITS
    if rest:
        bits = prepend_bin(bits, len(bits) + NIBBLE_BITS - rest)
    return "".join(
        HEX_ALPHABET[int(bits[i:i + NIBBLE_BITS], 2)]
        for i in range(0, len(bits), NIBBLE_BITS)
    )


def ifc_part_to_bin(char: str) -> str | ConversionError:
    """Decode one IFC GlobalId character to its (unpadded) binary index."""
    if len(char) != 1:
        return reject(
            ErrorKind.INVALID_LENGTH, "ifc_part_to_bin",
            f"expected a single character, got {len(char)}", char,
        )
    index = IFC_ALPHABET.find(char)
    if index < 0:
        return reject(
            ErrorKind.INVALID_SYMBOL, "ifc_part_to_bin",
            f"character {char!r} is not a valid IFC GlobalId character", char,
        )
    return format(index, "b")


def bin_part_to_ifc(bits: str) -> str | ConversionError:
    """Encode a group of 1-6 bits as one IFC GlobalId character."""
    if not 0 < len(bits) <= SYMBOL_BITS:
        return reject(
            ErrorKind.INVALID_LENGTH, "bin_part_to_ifc",
            f"bit group must be 1-{SYMBOL_BITS} characters, got {len(bits)}", bits,
        )
    bad = _first_non_binary(bits)
    if bad >= 0:
        return reject(
            ErrorKind.INVALID_SYMBOL, "bin_part_to_ifc",
            f"character {bits[bad]!r} at position {bad} is not 0 or 1", bits,
        )
    return IFC_ALPHABET[int(bits, 2)]


def ifc_to_bin(ifc: str) -> str | ConversionError:
    """Decode a 22-character IFC GlobalId to a 128-bit binary string."""
    if len(ifc) != IFC_LENGTH:
        return reject(
            ErrorKind.INVALID_LENGTH, "ifc_to_bin",
            f"IFC GlobalId must be {IFC_LENGTH} characters, got {len(ifc)}", ifc,
        )

    parts: list[str] = []
    for i, char in enumerate(ifc):
        part = ifc_part_to_bin(char)
        if isinstance(part, ConversionError):
            return part
        width = HEAD_BITS if i == 0 else SYMBOL_BITS
        if len(part) > width:
            # Only the first character can hit this: it holds 2 bits (0-3)
            return reject(
                ErrorKind.OVERFLOW, "ifc_to_bin",
                f"leading character {char!r} encodes more than {HEAD_BITS} bits", ifc,
            )
        parts.append(prepend_bin(part, width))
    return "".join(parts)


def bin_to_ifc(bits: str) -> str | ConversionError:
    """Encode a 128-bit binary string as a 22-character IFC GlobalId."""
    error = check_bin(bits, source="bin_to_ifc")
    if error is not None:
        return error

    # bits are already validated, so every group encodes cleanly
    chars = [bin_part_to_ifc(bits[:HEAD_BITS])]
    for i in range(HEAD_BITS, BIT_LENGTH, SYMBOL_BITS):
        chars.append(bin_part_to_ifc(bits[i:i + SYMBOL_BITS]))
    return "".join(chars)


def split_guid(hex_str: str, separator: str = "-") -> str:
    """Group 32 hex digits 8-4-4-4-12 and join them with ``separator``."""
    parts = []
    offset = 0
    for size in GUID_GROUPS:
        parts.append(hex_str[offset:offset + size])
        offset += size
    return separator.join(parts)
