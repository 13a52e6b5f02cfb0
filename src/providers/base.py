from abc import ABC, abstractmethod

from src.models import ExchangeRateTable, MetalPriceSnapshot


class PriceLoadError(RuntimeError):
    """Any failure that should end a load cycle in the Failed state."""


class MetalPriceError(PriceLoadError):
    pass


class CurrencyRateError(PriceLoadError):
    pass


class NetworkError(PriceLoadError):
    pass


class MetalPriceProvider(ABC):
    provider_name: str

    @abstractmethod
    def fetch_metal_prices(self) -> MetalPriceSnapshot:
        """Returns gold and silver prices in USD per troy ounce."""
        raise NotImplementedError


class ExchangeRateProvider(ABC):
    provider_name: str

    @abstractmethod
    def fetch_exchange_rates(self) -> ExchangeRateTable:
        """Returns {currency_code: units_per_usd}."""
        raise NotImplementedError
