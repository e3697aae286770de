"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/codec/tlv.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Tag-Length-Value field encoder. Turns single values and
                one-level nested groups into TAG + LENGTH + VALUE strings and
                tokenizes such strings back into fields.
------------------------------------------------------------------------------
"""

from typing import List

from pixqr.exceptions import FieldTooLong, MalformedPayload
from pixqr.models.fields import EncodedField, Field, Group, Leaf

MAX_VALUE_LENGTH = 99
HEADER_LENGTH = 4  # two tag digits plus two length digits


def _check_tag(tag: str) -> None:
    if len(tag) != 2 or not (tag.isascii() and tag.isdigit()):
        raise ValueError(f"Tag must be exactly two ASCII digits, got {tag!r}")


def encode_field(tag: str, value: str) -> EncodedField:
    """
    Encodes a single value as a TLV triplet.

    Args:
        tag: Two digit field identifier.
        value: The already truncated field value.

    Returns:
        The encoded field.

    Raises:
        FieldTooLong: If the value does not fit the two digit length.
    """
    _check_tag(tag)
    if len(value) > MAX_VALUE_LENGTH:
        raise FieldTooLong(tag, len(value))
    return EncodedField(tag=tag, length=f"{len(value):02d}", value=value)


def encode_group(tag: str, inner: str) -> EncodedField:
    """
    Wraps the concatenation of already encoded inner fields into an outer
    field. The length covers the whole serialized sub-payload.
    """
    return encode_field(tag, inner)


def serialize(field: Field) -> EncodedField:
    """Serializes a Leaf or a Group of leaves."""
    if isinstance(field, Leaf):
        return encode_field(field.tag, field.value)

    inner = []
    for child in field.children:
        if not isinstance(child, Leaf):
            raise ValueError(f"Group {field.tag} may only contain leaf fields")
        inner.append(str(encode_field(child.tag, child.value)))
    return encode_group(field.tag, "".join(inner))


def parse_fields(text: str) -> List[EncodedField]:
    """
    Splits a TLV string into its top-level fields.
    Nested groups are returned as a single field; call again on its value.

    Raises:
        MalformedPayload: On a truncated header or value.
    """
    fields = []
    pos = 0
    while pos < len(text):
        header = text[pos:pos + HEADER_LENGTH]
        if len(header) < HEADER_LENGTH or not (header.isascii() and header.isdigit()):
            raise MalformedPayload(f"Invalid field header {header!r} at offset {pos}")

        length = int(header[2:])
        start = pos + HEADER_LENGTH
        value = text[start:start + length]
        if len(value) != length:
            raise MalformedPayload(f"Field {header[:2]} at offset {pos} is truncated")

        fields.append(EncodedField(tag=header[:2], length=header[2:], value=value))
        pos = start + length
    return fields
