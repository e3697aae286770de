"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/codec/checksum.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    CRC-16/CCITT-FALSE checksum engine. The checksum field covers
                its own tag and length bytes ("6304") but not its value.
------------------------------------------------------------------------------
"""

CRC_POLYNOMIAL = 0x1021
CRC_INITIAL = 0xFFFF

CHECKSUM_TAG = "63"
CHECKSUM_LENGTH = "04"
CHECKSUM_HEADER = CHECKSUM_TAG + CHECKSUM_LENGTH
CHECKSUM_DIGITS = 4


def crc16_ccitt(data: bytes) -> int:
    """
    CRC-16/CCITT-FALSE: poly 0x1021, init 0xFFFF, MSB first,
    no reflection and no final XOR.
    """
    crc = CRC_INITIAL
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC_POLYNOMIAL) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def checksum(prefix: str) -> int:
    """
    Computes the checksum of a payload prefix.

    Args:
        prefix: Payload so far, already ending with the literal "6304".

    Returns:
        The 16 bit checksum.
    """
    return crc16_ccitt(prefix.encode("utf-8"))


def format_checksum(value: int) -> str:
    """Renders a checksum as four uppercase hex digits."""
    return f"{value & 0xFFFF:04X}"


def append_checksum(prefix: str) -> str:
    """Completes a payload whose prefix ends with "6304"."""
    return prefix + format_checksum(checksum(prefix))
