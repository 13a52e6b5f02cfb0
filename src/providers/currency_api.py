import logging
import os

from src.models import ExchangeRateTable
from src.providers.base import CurrencyRateError, ExchangeRateProvider
from src.providers.http import get_json

logger = logging.getLogger("spot_prices.providers.currency")

DEFAULT_ERROR_MESSAGE = "Failed to fetch currency exchange rates"


class CurrencyFreaksProvider(ExchangeRateProvider):
    """
    Provider implementation for currencyfreaks.com.

    The latest endpoint is USD based and returns rates as strings, e.g.
    {"base": "USD", "rates": {"EUR": "0.92", ...}}. Values are parsed to float
    here so callers only ever see numbers.
    """

    provider_name = "currencyfreaks"
    endpoint = "https://api.currencyfreaks.com/latest"

    def __init__(self, api_key: str | None = None, timeout_seconds: float | None = None):
        self.api_key = api_key if api_key is not None else os.getenv("CURRENCYFREAKS_KEY", "")
        self.timeout_seconds = timeout_seconds

    def fetch_exchange_rates(self) -> ExchangeRateTable:
        payload = get_json(
            self.endpoint,
            params={"apikey": self.api_key},
            timeout_seconds=self.timeout_seconds,
        )
        logger.debug("currencyfreaks payload: %s", payload)

        rates = payload.get("rates")
        if not rates or not isinstance(rates, dict):
            raise CurrencyRateError(DEFAULT_ERROR_MESSAGE)

        result: dict[str, float] = {}
        for code, raw_rate in rates.items():
            try:
                result[str(code).upper()] = float(raw_rate)
            except (TypeError, ValueError):
                logger.info("skipping unparseable %s rate: %r", code, raw_rate)

        if not result:
            raise CurrencyRateError(DEFAULT_ERROR_MESSAGE)

        return result
