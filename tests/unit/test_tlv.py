"""
------------------------------------------------------------------------------
Project:        PixQR
File:           tests/unit/test_tlv.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the TLV field encoder and tokenizer.
------------------------------------------------------------------------------
"""

import pytest

from pixqr.codec.tlv import encode_field, encode_group, parse_fields, serialize
from pixqr.exceptions import FieldTooLong, MalformedPayload
from pixqr.models import EncodedField, Group, Leaf


def test_encode_field_pads_length():
    field = encode_field("58", "BR")
    assert field == EncodedField(tag="58", length="02", value="BR")
    assert str(field) == "5802BR"


def test_encode_field_empty_value():
    assert str(encode_field("05", "")) == "0500"


def test_encode_field_length_boundary():
    assert encode_field("05", "x" * 99).length == "99"
    with pytest.raises(FieldTooLong) as exc:
        encode_field("05", "x" * 100)
    assert exc.value.tag == "05"
    assert exc.value.length == 100


@pytest.mark.parametrize("tag", ["5", "123", "ab", "", "５８"])
def test_encode_field_rejects_bad_tags(tag):
    with pytest.raises(ValueError):
        encode_field(tag, "value")


def test_encode_group_counts_serialized_inner_length():
    inner = str(encode_field("00", "BR.GOV.BCB.PIX")) + str(encode_field("01", "key"))
    group = encode_group("26", inner)
    assert group.length == f"{len(inner):02d}"
    assert str(group) == "2625" + "0014BR.GOV.BCB.PIX" + "0103key"


def test_serialize_group_of_leaves():
    group = Group("62", (Leaf("05", "***"),))
    assert str(serialize(group)) == "62070503***"


def test_serialize_rejects_deeper_nesting():
    nested = Group("62", (Group("05", (Leaf("01", "x"),)),))
    with pytest.raises(ValueError):
        serialize(nested)


def test_group_too_long_propagates():
    leaves = tuple(Leaf(f"{i:02d}", "x" * 20) for i in range(5))  # 5 * 24 = 120
    with pytest.raises(FieldTooLong):
        serialize(Group("26", leaves))


def test_parse_fields_splits_top_level():
    fields = parse_fields("000201" + "2625" + "0014BR.GOV.BCB.PIX0103key" + "5802BR")
    assert [f.tag for f in fields] == ["00", "26", "58"]
    assert fields[1].value == "0014BR.GOV.BCB.PIX0103key"
    assert [f.value for f in parse_fields(fields[1].value)] == ["BR.GOV.BCB.PIX", "key"]


@pytest.mark.parametrize("text", ["00", "0002", "0005abc", "xx02BR"])
def test_parse_fields_rejects_malformed_input(text):
    with pytest.raises(MalformedPayload):
        parse_fields(text)
