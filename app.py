from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from src.config import Settings, load_settings
from src.loader import PriceSession, build_session
from src.logging_config import init_logging
from src.ui import dashboard


# Load environment variables from local .env file.
load_dotenv(dotenv_path=Path(__file__).parent / ".env")


st.set_page_config(page_title="Gold & Silver Price Check", page_icon="🪙", layout="centered")


def _get_session(settings: Settings) -> PriceSession:
    if "price_session" not in st.session_state:
        st.session_state["price_session"] = build_session(settings)
    return st.session_state["price_session"]


def main() -> None:
    settings = load_settings()
    init_logging(debug=settings.debug)

    st.title("🪙 Gold & Silver Price Check")

    session = _get_session(settings)
    if session.load_status.is_loading:
        with st.spinner("Loading prices..."):
            session.orchestrator.load()

    dashboard.render(session)


if __name__ == "__main__":
    main()
