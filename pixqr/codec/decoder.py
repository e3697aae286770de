"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/codec/decoder.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Reads payloads produced by this codec back into a
                PaymentRequest. Not meant for codes of unknown origin.
------------------------------------------------------------------------------
"""

from decimal import Decimal, InvalidOperation
from typing import Dict, List

from pixqr.exceptions import MalformedPayload
from pixqr.models.fields import EncodedField
from pixqr.models.request import PaymentRequest

from . import assembler as asm
from .checksum import CHECKSUM_DIGITS, CHECKSUM_HEADER
from .tlv import parse_fields
from .verifier import verify


def _index(fields: List[EncodedField], where: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for field in fields:
        if field.tag in values:
            raise MalformedPayload(f"Duplicate tag {field.tag} in {where}")
        values[field.tag] = field.value
    return values


def _require(values: Dict[str, str], tag: str, where: str) -> str:
    if tag not in values:
        raise MalformedPayload(f"Missing tag {tag} in {where}")
    return values[tag]


def decode_payload(payload: str) -> PaymentRequest:
    """
    Verifies and parses a payload.

    Raises:
        ChecksumMismatch: If the payload fails verification.
        MalformedPayload: If the verified payload is not one of ours.
    """
    verify(payload)

    body = payload[:-CHECKSUM_DIGITS]
    if not body.endswith(CHECKSUM_HEADER):
        raise MalformedPayload("Checksum field header is missing")
    top = _index(parse_fields(body[:-len(CHECKSUM_HEADER)]), "payload")

    if _require(top, asm.TAG_PAYLOAD_FORMAT, "payload") != asm.PAYLOAD_FORMAT:
        raise MalformedPayload("Unsupported payload format indicator")

    account = _index(parse_fields(_require(top, asm.TAG_MERCHANT_ACCOUNT, "payload")), "merchant account")
    if _require(account, asm.TAG_GUI, "merchant account").upper() != asm.PIX_GUI:
        raise MalformedPayload("Merchant account belongs to another payment network")

    additional = _index(parse_fields(_require(top, asm.TAG_ADDITIONAL_DATA, "payload")), "additional data")

    amount = None
    if asm.TAG_AMOUNT in top:
        try:
            amount = Decimal(top[asm.TAG_AMOUNT])
        except InvalidOperation:
            raise MalformedPayload(f"Invalid amount {top[asm.TAG_AMOUNT]!r}")

    return PaymentRequest(
        beneficiary_key=_require(account, asm.TAG_BENEFICIARY_KEY, "merchant account"),
        merchant_name=_require(top, asm.TAG_MERCHANT_NAME, "payload"),
        merchant_city=_require(top, asm.TAG_MERCHANT_CITY, "payload"),
        amount=amount,
        reference_label=additional.get(asm.TAG_REFERENCE_LABEL, ""),
    )
