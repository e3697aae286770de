"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/codec/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for the EMV-QR payload codec. Exposes the
                encoder, assembler, checksum engine, verifier and decoder.
------------------------------------------------------------------------------
"""

from .assembler import assemble, assemble_and_checksum, build_fields, generate_payload
from .checksum import append_checksum, checksum, crc16_ccitt, format_checksum
from .decoder import decode_payload
from .tlv import encode_field, encode_group, parse_fields, serialize
from .verifier import is_valid, verify
