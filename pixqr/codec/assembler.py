"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/codec/assembler.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Composes a PaymentRequest into the canonical, ordered EMV-QR
                field sequence and serializes it up to the checksum header.
------------------------------------------------------------------------------
"""

import unicodedata
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import List, Optional

from pixqr.exceptions import InvalidRequest
from pixqr.logger import get_logger
from pixqr.models.fields import Field, Group, Leaf
from pixqr.models.request import PaymentRequest

from .checksum import CHECKSUM_HEADER, append_checksum
from .tlv import MAX_VALUE_LENGTH, serialize

logger = get_logger("codec.assembler")

# Top-level tags
TAG_PAYLOAD_FORMAT = "00"
TAG_POINT_OF_INITIATION = "01"
TAG_MERCHANT_ACCOUNT = "26"
TAG_MERCHANT_CATEGORY = "52"
TAG_CURRENCY = "53"
TAG_AMOUNT = "54"
TAG_COUNTRY = "58"
TAG_MERCHANT_NAME = "59"
TAG_MERCHANT_CITY = "60"
TAG_ADDITIONAL_DATA = "62"

# Sub-tags
TAG_GUI = "00"
TAG_BENEFICIARY_KEY = "01"
TAG_REFERENCE_LABEL = "05"

PAYLOAD_FORMAT = "01"
STATIC_INITIATION = "11"
PIX_GUI = "BR.GOV.BCB.PIX"
MERCHANT_CATEGORY_UNCLASSIFIED = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"

MAX_MERCHANT_NAME = 25
MAX_MERCHANT_CITY = 15
MAX_REFERENCE_LABEL = 25
MAX_AMOUNT_LENGTH = 13

_CENTS = Decimal("0.01")


def _to_ascii(text: str, what: str) -> str:
    """
    Transliterates accented characters ("São" -> "Sao") and rejects
    whatever is still not printable ASCII afterwards.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    if not all(" " <= ch <= "~" for ch in stripped):
        raise InvalidRequest(f"{what} contains characters that cannot be encoded: {text!r}")
    return stripped


def _clean_text(text: str, limit: int, what: str) -> str:
    # Truncate after transliteration so the limit counts wire characters
    return _to_ascii(text.strip(), what)[:limit]


def format_amount(amount: Decimal) -> str:
    """
    Fixed-point rendering with exactly two fraction digits.
    The rounded amount must be positive and fit 13 characters.
    """
    if not amount.is_finite():
        raise InvalidRequest(f"Amount must be a finite number, got {amount}")

    with localcontext() as ctx:
        ctx.prec = MAX_VALUE_LENGTH + 2
        try:
            quantized = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidRequest(f"Amount {amount} is out of range") from None

    if quantized <= 0:
        raise InvalidRequest(f"Amount must be positive after rounding to cents, got {amount}")
    text = format(quantized, "f")
    if len(text) > MAX_AMOUNT_LENGTH:
        raise InvalidRequest(f"Amount {text} exceeds {MAX_AMOUNT_LENGTH} characters")
    return text


def _beneficiary_key(request: PaymentRequest) -> str:
    key = request.beneficiary_key.strip()
    if not key:
        raise InvalidRequest("Beneficiary key is required")
    if not all(" " <= ch <= "~" for ch in key):
        raise InvalidRequest(f"Beneficiary key must be printable ASCII: {key!r}")
    return key


def build_fields(request: PaymentRequest) -> List[Field]:
    """
    Builds the canonical field tree for a request.
    Order matters and is part of the wire contract.
    """
    key = _beneficiary_key(request)
    name = _clean_text(request.merchant_name, MAX_MERCHANT_NAME, "Merchant name")
    city = _clean_text(request.merchant_city, MAX_MERCHANT_CITY, "Merchant city")
    reference = _clean_text(request.reference_label, MAX_REFERENCE_LABEL, "Reference label")

    amount: Optional[str] = None
    if request.amount is not None:
        amount = format_amount(request.amount)

    fields: List[Field] = [
        Leaf(TAG_PAYLOAD_FORMAT, PAYLOAD_FORMAT),
        Leaf(TAG_POINT_OF_INITIATION, STATIC_INITIATION),
        Group(TAG_MERCHANT_ACCOUNT, (
            Leaf(TAG_GUI, PIX_GUI),
            Leaf(TAG_BENEFICIARY_KEY, key),
        )),
        Leaf(TAG_MERCHANT_CATEGORY, MERCHANT_CATEGORY_UNCLASSIFIED),
        Leaf(TAG_CURRENCY, CURRENCY_BRL),
    ]
    # Open-amount codes leave the tag out entirely
    if amount is not None:
        fields.append(Leaf(TAG_AMOUNT, amount))
    fields.extend([
        Leaf(TAG_COUNTRY, COUNTRY_CODE),
        Leaf(TAG_MERCHANT_NAME, name),
        Leaf(TAG_MERCHANT_CITY, city),
        # Always present, even with an empty reference ("0500")
        Group(TAG_ADDITIONAL_DATA, (Leaf(TAG_REFERENCE_LABEL, reference),)),
    ])
    return fields


def assemble(request: PaymentRequest) -> str:
    """
    Serializes a request into the un-checksummed payload.

    Returns:
        The payload ending with the checksum header "6304".

    Raises:
        InvalidRequest: If the beneficiary key, amount or text is unusable.
        FieldTooLong: If a field still exceeds 99 characters.
    """
    prefix = "".join(str(serialize(field)) for field in build_fields(request))
    logger.debug(f"Assembled payload prefix ({len(prefix)} chars)")
    return prefix + CHECKSUM_HEADER


def assemble_and_checksum(request: PaymentRequest) -> str:
    """Builds the complete payload including its checksum value."""
    return append_checksum(assemble(request))


generate_payload = assemble_and_checksum
