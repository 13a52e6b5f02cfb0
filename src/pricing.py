from typing import Optional

from src.models import ExchangeRateTable, MetalPriceSnapshot

# Grams per troy ounce as used throughout the app. Do not replace with 31.1034768.
OUNCE_TO_GRAM = 31.1035

BASE_CURRENCY = "USD"


def round_money(value: float) -> float:
    return round(value, 2)


def format_price(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{round_money(value):.2f}"


class PriceComposer:
    """
    Holds the latest metal snapshot and exchange rate table and converts
    USD-per-ounce prices into the selected currency and unit.

    Both datasets are swapped together through replace(); nothing mutates them
    in place.
    """

    def __init__(
        self,
        snapshot: MetalPriceSnapshot | None = None,
        rates: ExchangeRateTable | None = None,
    ):
        self.snapshot = snapshot or MetalPriceSnapshot()
        self.rates: ExchangeRateTable = dict(rates or {})

    def replace(self, snapshot: MetalPriceSnapshot, rates: ExchangeRateTable) -> None:
        self.snapshot = snapshot
        self.rates = dict(rates)

    def convert_currency(self, price_usd: float, target_currency: str) -> Optional[float]:
        if target_currency == BASE_CURRENCY:
            return price_usd
        rate = self.rates.get(target_currency)
        if rate is None:
            return None
        return price_usd * float(rate)

    def convert_unit(self, price: float, unit: str) -> float:
        if unit == "gram":
            return price / OUNCE_TO_GRAM
        return price

    def get_price(
        self, price_usd: Optional[float], target_currency: str, unit: str
    ) -> Optional[float]:
        # Currency first: rates apply to the per-ounce USD value.
        if not price_usd:
            return None
        price_in_currency = self.convert_currency(price_usd, target_currency)
        if price_in_currency is None:
            return None
        return self.convert_unit(price_in_currency, unit)

    def metal_price(self, symbol: str, target_currency: str, unit: str) -> Optional[float]:
        return self.get_price(self.snapshot.price_for(symbol), target_currency, unit)
