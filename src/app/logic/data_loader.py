"""Ledger access for the Streamlit application.

The ledger is loaded once per server process and shared across reruns
and pages, so every page sees the same snapshot.
"""

import streamlit as st
from loguru import logger

from src.config.settings import settings
from src.core.ledger import Ledger


@st.cache_resource(show_spinner="Carregando dados...")  # type: ignore[misc]
def get_ledger() -> Ledger:
    """Open the file-backed ledger configured in settings."""
    logger.info(f"Opening ledger in {settings.data_dir}")
    return Ledger.open(settings.data_dir, key=settings.storage_key)
