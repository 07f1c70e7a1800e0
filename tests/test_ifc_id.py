"""Tests for GlobalId generation and compress/expand, checked against ifcopenshell."""

import uuid

import ifcopenshell.guid
import pytest

from ifc_guid import (
    IFC_ALPHABET,
    ConversionError,
    ErrorKind,
    compress,
    expand,
    generate_ifc_id,
    is_valid_ifc_id,
)

GUID = "01cf62c8-e9bc-bf88-0000-000000000005"
IFC = "01psB8wRo$Y00000000005"


class TestGenerate:
    def test_length_and_alphabet(self):
        gid = generate_ifc_id()
        assert len(gid) == 22
        assert set(gid) <= set(IFC_ALPHABET)
        assert gid[0] in "0123"

    def test_unique(self):
        ids = {generate_ifc_id() for _ in range(200)}
        assert len(ids) == 200

    def test_valid(self):
        assert is_valid_ifc_id(generate_ifc_id())


class TestIsValid:
    def test_known_id(self):
        assert is_valid_ifc_id(IFC)

    @pytest.mark.parametrize("value", [
        IFC[:-1],
        IFC + "0",
        "01psB8wRo-Y00000000005",
        "4" + "0" * 21,
        None,
        12345,
    ])
    def test_invalid(self, value):
        assert not is_valid_ifc_id(value)


class TestCompressExpand:
    def test_known_vector(self):
        assert compress(GUID) == IFC
        assert expand(IFC) == GUID.replace("-", "")

    def test_errors(self):
        assert isinstance(compress("abc"), ConversionError)
        assert expand("abc").kind == ErrorKind.INVALID_LENGTH


class TestIfcopenshellInterop:
    """Results must match ifcopenshell.guid for the same identifiers."""

    @pytest.mark.parametrize("hex_str", [
        "01cf62c8e9bcbf880000000000000005",
        "0" * 32,
        "f" * 32,
        "3f2504e04f8941d39a0c0305e82c3301",
    ])
    def test_known_values(self, hex_str):
        assert compress(hex_str) == ifcopenshell.guid.compress(hex_str)
        assert expand(ifcopenshell.guid.compress(hex_str)) == hex_str

    def test_random_values(self):
        for _ in range(50):
            hex_str = uuid.uuid4().hex
            assert compress(hex_str) == ifcopenshell.guid.compress(hex_str)

    def test_generated_ids_expand_in_ifcopenshell(self):
        for _ in range(50):
            gid = generate_ifc_id()
            assert ifcopenshell.guid.expand(gid) == expand(gid)
