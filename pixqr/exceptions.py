"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/exceptions.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Error types raised by the payload codec. All of them are
                recoverable and meant for the immediate caller.
------------------------------------------------------------------------------
"""


class PixQRError(Exception):
    """Base class for all codec errors."""


class FieldTooLong(PixQRError):
    """A TLV value exceeds the 99 character length budget."""

    def __init__(self, tag: str, length: int) -> None:
        self.tag = tag
        self.length = length
        super().__init__(f"Field {tag} is {length} characters long (max 99)")


class InvalidRequest(PixQRError):
    """The payment request lacks usable identifying data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ChecksumMismatch(PixQRError):
    """
    The trailing checksum of a payload does not match the recomputed one.
    Carries both values for diagnostics.
    """

    def __init__(self, claimed: str, computed: str) -> None:
        self.claimed = claimed
        self.computed = computed
        super().__init__(f"Checksum mismatch: payload claims {claimed!r}, computed {computed!r}")


class MalformedPayload(PixQRError):
    """A payload passed its checksum but is not structured like one of ours."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
