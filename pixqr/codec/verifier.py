"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/codec/verifier.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Integrity check for payloads produced by this codec. Confirms
                the trailing checksum only, never provenance or content.
------------------------------------------------------------------------------
"""

from pixqr.exceptions import ChecksumMismatch
from pixqr.logger import get_logger

from .checksum import CHECKSUM_DIGITS, checksum, format_checksum

logger = get_logger("codec.verifier")


def verify(payload: str) -> None:
    """
    Recomputes the checksum over everything but the last four characters.

    Raises:
        ChecksumMismatch: If the claimed and computed checksums differ.
    """
    prefix = payload[:-CHECKSUM_DIGITS]
    claimed = payload[-CHECKSUM_DIGITS:]
    computed = format_checksum(checksum(prefix))

    if claimed != computed:
        logger.debug(f"Checksum mismatch: claimed={claimed!r} computed={computed!r}")
        raise ChecksumMismatch(claimed, computed)


def is_valid(payload: str) -> bool:
    """Boolean form of verify()."""
    try:
        verify(payload)
    except ChecksumMismatch:
        return False
    return True
