from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

SUPPORTED_CURRENCIES = ["USD", "EUR", "GBP", "INR", "JPY", "AUD", "CAD"]
SUPPORTED_UNITS = ["gram", "ounce"]

METAL_NAMES = {
    "XAU": "Gold",
    "XAG": "Silver",
}

# Currency code -> units of that currency per 1 USD. USD itself is implicit.
ExchangeRateTable = Mapping[str, Union[str, float]]


@dataclass(frozen=True)
class MetalPriceSnapshot:
    gold_usd_per_oz: Optional[float] = None
    silver_usd_per_oz: Optional[float] = None

    def price_for(self, symbol: str) -> Optional[float]:
        if symbol == "XAU":
            return self.gold_usd_per_oz
        if symbol == "XAG":
            return self.silver_usd_per_oz
        raise KeyError(f"Unsupported metal symbol: {symbol}")


@dataclass
class Selection:
    currency: str = "USD"
    unit: str = "gram"

    def __post_init__(self) -> None:
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValueError(
                f"Unsupported currency '{self.currency}'. Use one of: {', '.join(SUPPORTED_CURRENCIES)}"
            )
        if self.unit not in SUPPORTED_UNITS:
            raise ValueError(f"Unsupported unit '{self.unit}'. Use 'gram' or 'ounce'.")


class LoadState(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadStatus:
    state: LoadState
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "LoadStatus":
        return cls(LoadState.LOADING)

    @classmethod
    def ready(cls) -> "LoadStatus":
        return cls(LoadState.READY)

    @classmethod
    def failed(cls, message: str) -> "LoadStatus":
        return cls(LoadState.FAILED, message)

    @property
    def is_loading(self) -> bool:
        return self.state is LoadState.LOADING

    @property
    def is_ready(self) -> bool:
        return self.state is LoadState.READY

    @property
    def is_failed(self) -> bool:
        return self.state is LoadState.FAILED
