"""IFC GlobalId generation and one-shot conversions.

IFC uses 22-character compressed GUIDs (base64-ish encoding of 128-bit UUIDs).
``compress``/``expand`` mirror the helpers of the same name in
``ifcopenshell.guid`` so callers can switch between the two.
"""

from __future__ import annotations

import uuid

from ifc_guid.codec import ifc_to_bin
from ifc_guid.errors import ConversionError
from ifc_guid.guid import Guid128


def generate_ifc_id() -> str:
    """Generate a new IFC-compatible GlobalId (22 characters)."""
    return Guid128.from_uuid(uuid.uuid4()).to_ifc()


def is_valid_ifc_id(value: object) -> bool:
    """Check if a value is a decodable 22-character IFC GlobalId."""
    return isinstance(value, str) and not isinstance(ifc_to_bin(value), ConversionError)


def compress(guid: str) -> str | ConversionError:
    """GUID (hyphenated or plain hex) -> IFC GlobalId."""
    value = Guid128.from_guid(guid)
    if isinstance(value, ConversionError):
        return value
    return value.to_ifc()


def expand(ifc: str) -> str | ConversionError:
    """IFC GlobalId -> 32 lower-case hex digits."""
    value = Guid128.from_ifc(ifc)
    if isinstance(value, ConversionError):
        return value
    return value.to_hex()
