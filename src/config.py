import os
from dataclasses import dataclass
from typing import Optional

from src.models import Selection

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime options read from the environment (a local .env is loaded by app.py)."""

    metalpriceapi_key: str = ""
    currencyfreaks_key: str = ""
    http_timeout_seconds: Optional[float] = None
    debug: bool = False
    default_currency: str = "USD"
    default_unit: str = "gram"

    def default_selection(self) -> Selection:
        return Selection(currency=self.default_currency, unit=self.default_unit)


def _read_timeout(raw: str) -> Optional[float]:
    # Unset means no timeout: a hung provider keeps the page in Loading.
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"PRICE_HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError("PRICE_HTTP_TIMEOUT_SECONDS must be greater than zero")
    return value


def load_settings() -> Settings:
    # Keys are passed through as-is; a missing key shows up as a provider auth error.
    settings = Settings(
        metalpriceapi_key=os.getenv("METALPRICEAPI_KEY", "").strip(),
        currencyfreaks_key=os.getenv("CURRENCYFREAKS_KEY", "").strip(),
        http_timeout_seconds=_read_timeout(os.getenv("PRICE_HTTP_TIMEOUT_SECONDS", "").strip()),
        debug=os.getenv("PRICE_APP_DEBUG", "").strip().lower() in TRUTHY,
        default_currency=os.getenv("DEFAULT_CURRENCY", "USD").strip().upper() or "USD",
        default_unit=os.getenv("DEFAULT_UNIT", "gram").strip().lower() or "gram",
    )
    # Fail at startup on an unsupported DEFAULT_CURRENCY / DEFAULT_UNIT.
    settings.default_selection()
    return settings
