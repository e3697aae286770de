"""
------------------------------------------------------------------------------
Project:        PixQR
File:           tests/unit/test_service.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the payment code service.
------------------------------------------------------------------------------
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from pixqr.codec import decode_payload, is_valid
from pixqr.exceptions import InvalidRequest
from pixqr.models import PaymentRequest
from pixqr.service import PixCodeService

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def service(config):
    config.set_pix_key("loja@example.com")
    config.set_merchant_name("Loja Exemplo")
    config.set_merchant_city("Curitiba")
    config.set_expiration_minutes(15)
    return PixCodeService(config)


def test_build_request_uses_configured_merchant(service):
    request = service.build_request(Decimal("9.90"), "Pedido 7")
    assert request.beneficiary_key == "loja@example.com"
    assert request.merchant_name == "Loja Exemplo"
    assert request.merchant_city == "Curitiba"
    assert request.reference_label == "Pedido 7"


def test_generate_pix_code(service):
    code = service.generate_pix_code(Decimal("9.90"), "Pedido 7", now=NOW)

    assert is_valid(code.payload)
    assert len(code.code_id) == 32
    int(code.code_id, 16)
    assert code.amount == Decimal("9.90")
    assert code.created_at == NOW
    assert code.expires_at == NOW + timedelta(minutes=15)
    assert decode_payload(code.payload).reference_label == "Pedido 7"


def test_code_ids_are_unique_but_payloads_deterministic(service):
    first = service.generate_pix_code(Decimal("1.00"), "x", now=NOW)
    second = service.generate_pix_code(Decimal("1.00"), "x", now=NOW)
    assert first.code_id != second.code_id
    assert first.payload == second.payload


def test_generate_logs_success(service, caplog):
    caplog.set_level(logging.INFO, logger="pixqr")
    code = service.generate_pix_code(None, now=NOW)
    assert code.code_id in caplog.text


def test_generate_logs_and_raises_on_invalid_request(service, caplog):
    request = PaymentRequest(beneficiary_key="", merchant_name="X", merchant_city="Y")
    with caplog.at_level(logging.ERROR, logger="pixqr"):
        with pytest.raises(InvalidRequest):
            service.generate(request, now=NOW)
    assert "Beneficiary key is required" in caplog.text


def test_is_expired():
    expires_at = NOW + timedelta(minutes=30)
    assert not PixCodeService.is_expired(expires_at, now=NOW)
    assert not PixCodeService.is_expired(expires_at, now=expires_at)
    assert PixCodeService.is_expired(expires_at, now=expires_at + timedelta(seconds=1))


def test_qr_image_is_rendered(service, tmp_path):
    code = service.generate_pix_code(Decimal("9.90"), "Pedido 7", now=NOW)
    img = PixCodeService.get_qr_image(code.payload)
    out = tmp_path / "code.png"
    img.save(str(out))
    assert out.stat().st_size > 0
    assert out.read_bytes().startswith(b"\x89PNG")
