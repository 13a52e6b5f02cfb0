import logging
import os
from typing import Any, Optional

from src.models import MetalPriceSnapshot
from src.providers.base import MetalPriceError, MetalPriceProvider
from src.providers.http import get_json

logger = logging.getLogger("spot_prices.providers.metals")

DEFAULT_ERROR_MESSAGE = "Failed to fetch metal prices"


class MetalPriceAPIProvider(MetalPriceProvider):
    """
    Provider implementation for metalpriceapi.com.

    Requests base=USD for XAU and XAG and reads the USDXAU / USDXAG fields,
    which are passed through unchanged as USD per troy ounce. The plain XAU /
    XAG fields (metal ounces per USD) are not used.
    """

    provider_name = "metalpriceapi"
    endpoint = "https://api.metalpriceapi.com/v1/latest"
    symbols = ["XAU", "XAG"]

    def __init__(self, api_key: str | None = None, timeout_seconds: float | None = None):
        self.api_key = api_key if api_key is not None else os.getenv("METALPRICEAPI_KEY", "")
        self.timeout_seconds = timeout_seconds

    def fetch_metal_prices(self) -> MetalPriceSnapshot:
        payload = get_json(
            self.endpoint,
            params={
                "api_key": self.api_key,
                "base": "USD",
                "currencies": ",".join(self.symbols),
            },
            timeout_seconds=self.timeout_seconds,
        )
        logger.debug("metalpriceapi payload: %s", payload)

        if not payload.get("success"):
            raise MetalPriceError(_error_message(payload.get("error")))

        rates = payload.get("rates")
        if not isinstance(rates, dict):
            raise MetalPriceError("Metal price response has no rates")

        return MetalPriceSnapshot(
            gold_usd_per_oz=_read_rate(rates, "USDXAU"),
            silver_usd_per_oz=_read_rate(rates, "USDXAG"),
        )


def _error_message(error: Any) -> str:
    # metalpriceapi sends either a string or {"statusCode": ..., "message": ...}.
    if isinstance(error, dict):
        error = error.get("message") or error.get("info")
    if error:
        return str(error)
    return DEFAULT_ERROR_MESSAGE


def _read_rate(rates: dict[str, Any], field: str) -> Optional[float]:
    value = rates.get(field)
    if value is None:
        logger.warning("metalpriceapi response has no %s rate", field)
        return None
    if isinstance(value, bool):
        raise MetalPriceError(f"Invalid {field} rate from provider")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MetalPriceError(f"Invalid {field} rate from provider") from exc
