import pytest

from src.models import MetalPriceSnapshot
from src.pricing import PriceComposer
from src.providers.base import (
    CurrencyRateError,
    NetworkError,
    ExchangeRateProvider,
    MetalPriceError,
    MetalPriceProvider,
)


class FakeMetalProvider(MetalPriceProvider):
    provider_name = "fake-metals"

    def __init__(self, snapshot=None, error=None):
        self.snapshot = snapshot
        self.error = error
        self.calls = 0

    def fetch_metal_prices(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.snapshot


class FakeRateProvider(ExchangeRateProvider):
    provider_name = "fake-rates"

    def __init__(self, rates=None, error=None):
        self.rates = rates
        self.error = error
        self.calls = 0

    def fetch_exchange_rates(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rates


@pytest.fixture
def sample_snapshot():
    return MetalPriceSnapshot(gold_usd_per_oz=2000.0, silver_usd_per_oz=25.0)


@pytest.fixture
def sample_exchange_rates():
    """Rates as CurrencyFreaks sends them: strings, USD based. JPY deliberately missing."""
    return {
        "USD": "1.0",
        "EUR": "0.92",
        "GBP": "0.79",
        "INR": "83.12",
        "AUD": "1.52",
        "CAD": "1.36",
    }


@pytest.fixture
def composer(sample_snapshot, sample_exchange_rates):
    return PriceComposer(sample_snapshot, sample_exchange_rates)


@pytest.fixture
def metal_provider(sample_snapshot):
    return FakeMetalProvider(snapshot=sample_snapshot)


@pytest.fixture
def rate_provider(sample_exchange_rates):
    return FakeRateProvider(rates={code: float(rate) for code, rate in sample_exchange_rates.items()})


@pytest.fixture
def failing_metal_provider():
    return FakeMetalProvider(error=MetalPriceError("Invalid API Key"))


@pytest.fixture
def failing_rate_provider():
    return FakeRateProvider(error=CurrencyRateError("Failed to fetch currency exchange rates"))


@pytest.fixture
def unreachable_metal_provider():
    return FakeMetalProvider(error=NetworkError("Could not reach host (ConnectionError)"))


@pytest.fixture
def buggy_metal_provider():
    return FakeMetalProvider(error=TypeError("bug"))
