import logging
from dataclasses import dataclass, field
from typing import Optional

from src.config import Settings
from src.logging_config import load_cycle_context
from src.models import LoadStatus, Selection
from src.pricing import PriceComposer
from src.providers.base import ExchangeRateProvider, MetalPriceProvider, PriceLoadError
from src.providers.currency_api import CurrencyFreaksProvider
from src.providers.metals_api import MetalPriceAPIProvider

logger = logging.getLogger("spot_prices.loader")


class LoadOrchestrator:
    """
    Runs the single load cycle: metals first, then exchange rates.

    The composer is only written once both fetches succeed, so a Failed status
    never leaves half a dataset behind. There is no refresh; load() after the
    first cycle returns the existing status.
    """

    def __init__(
        self,
        metal_provider: MetalPriceProvider,
        rate_provider: ExchangeRateProvider,
        composer: PriceComposer | None = None,
    ):
        self.metal_provider = metal_provider
        self.rate_provider = rate_provider
        self.composer = composer or PriceComposer()
        self.status = LoadStatus.loading()
        self._started = False

    def load(self) -> LoadStatus:
        if self._started:
            return self.status
        self._started = True
        self.status = LoadStatus.loading()

        with load_cycle_context():
            logger.info("load cycle started")
            try:
                snapshot = self.metal_provider.fetch_metal_prices()
                logger.info(
                    "metal prices fetched",
                    extra={"provider": self.metal_provider.provider_name},
                )
                rates = self.rate_provider.fetch_exchange_rates()
                logger.info(
                    "exchange rates fetched",
                    extra={"provider": self.rate_provider.provider_name, "rate_count": len(rates)},
                )
            except PriceLoadError as exc:
                self.status = LoadStatus.failed(str(exc))
                logger.warning(
                    "load cycle failed: %s", exc, extra={"load_state": self.status.state.value}
                )
                return self.status

            self.composer.replace(snapshot, rates)
            self.status = LoadStatus.ready()
            logger.info("load cycle ready", extra={"load_state": self.status.state.value})
        return self.status


@dataclass
class PriceSession:
    """State handed to the presentation layer for one browser session."""

    orchestrator: LoadOrchestrator
    selection: Selection = field(default_factory=Selection)

    @property
    def load_status(self) -> LoadStatus:
        return self.orchestrator.status

    @property
    def composer(self) -> PriceComposer:
        return self.orchestrator.composer

    def get_price(self, price_usd: Optional[float]) -> Optional[float]:
        return self.composer.get_price(price_usd, self.selection.currency, self.selection.unit)

    def metal_price(self, symbol: str) -> Optional[float]:
        return self.get_price(self.composer.snapshot.price_for(symbol))

    def select(self, currency: str, unit: str) -> None:
        self.selection = Selection(currency=currency, unit=unit)


def build_session(settings: Settings) -> PriceSession:
    orchestrator = LoadOrchestrator(
        MetalPriceAPIProvider(
            api_key=settings.metalpriceapi_key,
            timeout_seconds=settings.http_timeout_seconds,
        ),
        CurrencyFreaksProvider(
            api_key=settings.currencyfreaks_key,
            timeout_seconds=settings.http_timeout_seconds,
        ),
    )
    return PriceSession(orchestrator=orchestrator, selection=settings.default_selection())
