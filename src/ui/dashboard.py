import pandas as pd
import streamlit as st

from src.loader import PriceSession
from src.models import METAL_NAMES, SUPPORTED_CURRENCIES, SUPPORTED_UNITS
from src.pricing import PriceComposer, format_price

UNIT_LABELS = {
    "gram": "Per Gram",
    "ounce": "Per Ounce",
}


def build_price_rows(composer: PriceComposer, unit: str) -> list[dict[str, str]]:
    rows = []
    for currency in SUPPORTED_CURRENCIES:
        row = {"Currency": currency}
        for symbol, name in METAL_NAMES.items():
            row[f"{name} ({unit})"] = format_price(composer.metal_price(symbol, currency, unit))
        rows.append(row)
    return rows


def _render_selection(session: PriceSession) -> None:
    col1, col2 = st.columns(2)
    with col1:
        currency = st.selectbox(
            "Select Currency",
            options=SUPPORTED_CURRENCIES,
            index=SUPPORTED_CURRENCIES.index(session.selection.currency),
        )
    with col2:
        unit = st.radio(
            "Select Unit",
            options=SUPPORTED_UNITS,
            index=SUPPORTED_UNITS.index(session.selection.unit),
            format_func=lambda value: UNIT_LABELS[value],
            horizontal=True,
        )
    session.select(currency, unit)


def render(session: PriceSession) -> None:
    _render_selection(session)

    status = session.load_status
    if status.is_loading:
        st.info("Loading prices...")
        return
    if status.is_failed:
        st.error(f"Error: {status.message}")
        return

    currency = session.selection.currency
    unit = session.selection.unit

    cols = st.columns(len(METAL_NAMES))
    for col, (symbol, name) in zip(cols, METAL_NAMES.items()):
        col.metric(f"{name} ({unit})", f"{format_price(session.metal_price(symbol))} {currency}")

    with st.expander("All currencies"):
        df = pd.DataFrame(build_price_rows(session.composer, unit))
        st.dataframe(df, width="stretch", hide_index=True)

    st.caption(
        "Powered by [MetalpriceAPI](https://metalpriceapi.com/) & "
        "[CurrencyFreaks](https://currencyfreaks.com/)"
    )
