"""Conversions between GUID, binary, decimal and IFC GlobalId identifiers."""

from ifc_guid.codec import (
    IFC_ALPHABET,
    bin_part_to_ifc,
    bin_to_hex,
    bin_to_ifc,
    check_bin,
    hex_to_bin,
    ifc_part_to_bin,
    ifc_to_bin,
    prepend_bin,
    split_guid,
    validate_bin,
)
from ifc_guid.errors import ConversionError, ErrorKind
from ifc_guid.guid import Guid128, IfcGuid
from ifc_guid.ifc_id import compress, expand, generate_ifc_id, is_valid_ifc_id

__version__ = "0.1.0"

__all__ = [
    "IFC_ALPHABET",
    "bin_part_to_ifc",
    "bin_to_hex",
    "bin_to_ifc",
    "check_bin",
    "hex_to_bin",
    "ifc_part_to_bin",
    "ifc_to_bin",
    "prepend_bin",
    "split_guid",
    "validate_bin",
    "ConversionError",
    "ErrorKind",
    "Guid128",
    "IfcGuid",
    "compress",
    "expand",
    "generate_ifc_id",
    "is_valid_ifc_id",
]
