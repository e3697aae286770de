"""
------------------------------------------------------------------------------
Project:        PixQR
File:           main.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Command line entry point. Loads the configuration profile,
                sets up logging and generates, verifies or decodes payment
                payloads.
------------------------------------------------------------------------------
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pixqr.codec import decode_payload, verify
from pixqr.config import AppConfig
from pixqr.exceptions import ChecksumMismatch, PixQRError
from pixqr.logger import get_logger, setup_logging
from pixqr.service import PixCodeService


def _amount(text: str) -> Decimal:
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {text!r}")
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"invalid amount: {text!r}")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PixQR - Instant payment QR payloads")
    parser.add_argument("--profile", help="Configuration profile (e.g. dev, test)")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a payload for the configured merchant")
    gen.add_argument("--amount", type=_amount, default=None, help="Fixed amount (omit for open amount)")
    gen.add_argument("--description", default="", help="Reference label")
    gen.add_argument("--png", help="Also write the QR image to this file")

    ver = sub.add_parser("verify", help="Check the checksum of a payload")
    ver.add_argument("payload")

    dec = sub.add_parser("decode", help="Show the fields of a payload generated by PixQR")
    dec.add_argument("payload")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    app_config = AppConfig(profile=args.profile)
    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("cli")
    logger.info(f"PixQR started (Profile: {args.profile or 'default'}, command: {args.command})")

    try:
        if args.command == "generate":
            service = PixCodeService(app_config)
            code = service.generate_pix_code(args.amount, args.description)
            print(code.payload)
            if args.png:
                service.get_qr_image(code.payload).save(args.png)
                logger.info(f"QR image written to {args.png}")
        elif args.command == "verify":
            verify(args.payload)
            print("OK")
        elif args.command == "decode":
            request = decode_payload(args.payload)
            for name, value in request.model_dump().items():
                print(f"{name}: {'' if value is None else value}")
    except ChecksumMismatch as e:
        print(f"INVALID: {e}", file=sys.stderr)
        return 1
    except PixQRError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
