"""
Runs one load cycle against the live providers and prints gold and silver
prices in every supported currency. Reads keys from the same .env as app.py.

Usage: python -m scripts.check_prices
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config import load_settings
from src.loader import build_session
from src.logging_config import init_logging
from src.models import METAL_NAMES, SUPPORTED_CURRENCIES, SUPPORTED_UNITS
from src.pricing import format_price

load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")


def main() -> int:
    settings = load_settings()
    init_logging(debug=settings.debug)

    session = build_session(settings)
    status = session.orchestrator.load()
    if status.is_failed:
        print(f"Error: {status.message}")
        return 1

    for unit in SUPPORTED_UNITS:
        print(f"Prices per {unit}:")
        for currency in SUPPORTED_CURRENCIES:
            session.select(currency, unit)
            parts = [
                f"{name} {format_price(session.metal_price(symbol))}"
                for symbol, name in METAL_NAMES.items()
            ]
            print(f"  {currency}: " + ", ".join(parts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
