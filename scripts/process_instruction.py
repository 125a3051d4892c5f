"""Process one payment instruction payload from a JSON file or stdin."""

from __future__ import annotations

import argparse
import json
import sys

from paydesk.config import get_settings
from paydesk.logging_setup import configure_logging
from paydesk.services.payment_service import PaymentService


def run(path: str) -> None:
    """Load ``{"accounts": [...], "instruction": "..."}`` and print the result."""

    settings = get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)

    if path == "-":
        payload = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)

    result = PaymentService.from_settings(settings).process_payload(payload)
    print(result.model_dump_json(indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("payload", help="path to a JSON payload, or - for stdin")
    run(parser.parse_args().payload)
