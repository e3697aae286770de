"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/models/fields.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Immutable TLV building blocks. A payload is described as a
                small tree of Leaf and Group nodes which serialize into
                EncodedField triplets.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class EncodedField:
    """
    A serialized TAG + LENGTH + VALUE triplet.
    Tag and length are always two ASCII digits each.
    """

    tag: str
    length: str
    value: str

    def __str__(self) -> str:
        return f"{self.tag}{self.length}{self.value}"


@dataclass(frozen=True)
class Leaf:
    """A plain field carrying a text value."""

    tag: str
    value: str


@dataclass(frozen=True)
class Group:
    """A field whose value is the concatenation of encoded leaf fields."""

    tag: str
    children: Tuple[Leaf, ...]


Field = Union[Leaf, Group]
