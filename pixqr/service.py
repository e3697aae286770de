"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/service.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Payment code service. Fills a PaymentRequest from the
                configured merchant defaults, mints a code id and expiry,
                produces the payload and renders it as a QR image.
------------------------------------------------------------------------------
"""

import secrets
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import qrcode

from pixqr.codec import generate_payload
from pixqr.config import AppConfig
from pixqr.exceptions import PixQRError
from pixqr.logger import get_logger
from pixqr.models.request import PaymentRequest, PixCode

logger = get_logger("service")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PixCodeService:
    """
    Generates payment codes for charges using the merchant identity
    stored in AppConfig.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    def build_request(self, amount: Optional[Decimal], description: str = "") -> PaymentRequest:
        """
        Creates a request for the configured merchant.

        Args:
            amount: Charge amount, or None for an open-amount code.
            description: Free text used as reference label.
        """
        return PaymentRequest(
            beneficiary_key=self.config.get_pix_key(),
            merchant_name=self.config.get_merchant_name(),
            merchant_city=self.config.get_merchant_city(),
            amount=amount,
            reference_label=description,
        )

    def generate(self, request: PaymentRequest, now: Optional[datetime] = None) -> PixCode:
        """
        Produces a payment code for a request.

        Args:
            request: The payment request.
            now: Creation time, defaults to the current UTC time.

        Returns:
            The generated PixCode.

        Raises:
            PixQRError: If the request cannot be encoded.
        """
        created_at = now or _utcnow()
        code_id = secrets.token_hex(16)
        try:
            payload = generate_payload(request)
        except PixQRError as e:
            logger.error(f"Error generating payment code {code_id}: {e}")
            raise

        expires_at = created_at + timedelta(minutes=self.config.get_expiration_minutes())
        logger.info(f"Payment code {code_id} generated (amount={request.amount}, expires={expires_at.isoformat()})")
        return PixCode(
            code_id=code_id,
            payload=payload,
            amount=request.amount,
            created_at=created_at,
            expires_at=expires_at,
        )

    def generate_pix_code(
        self,
        amount: Optional[Decimal],
        description: str = "",
        now: Optional[datetime] = None
    ) -> PixCode:
        """Shortcut for build_request() followed by generate()."""
        return self.generate(self.build_request(amount, description), now=now)

    @staticmethod
    def is_expired(expires_at: datetime, now: Optional[datetime] = None) -> bool:
        """True once the expiry moment has passed."""
        return (now or _utcnow()) > expires_at

    @staticmethod
    def get_qr_image(payload: str):
        """
        Renders a payload as a QR code image (PIL backed).
        """
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=4,
        )
        qr.add_data(payload)
        qr.make(fit=True)
        return qr.make_image(fill_color="black", back_color="white")
