"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Instant-payment QR payload codec: TLV encoding, payload
                assembly, CRC-16 checksum and verification.
------------------------------------------------------------------------------
"""

from .codec import decode_payload, generate_payload, is_valid, verify
from .exceptions import ChecksumMismatch, FieldTooLong, InvalidRequest, MalformedPayload, PixQRError
from .models import PaymentRequest, PixCode
from .service import PixCodeService

__version__ = "1.0.0"
