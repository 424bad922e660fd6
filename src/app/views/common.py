"""Common UI components shared across pages.

Pure rendering functions for reusable Streamlit widgets.
"""

import streamlit as st

from src.config.settings import settings
from src.core.formatting import format_currency

GLOBAL_MARGINS = dict(t=10, l=5, r=5, b=5)
GLOBAL_FONT = dict(
    family="Arial",
    size=14,
)


def setup_page(page_title: str, page_icon: str) -> None:
    """Page config plus the stall header shown on every page."""
    st.set_page_config(
        page_title=f"{page_title} · {settings.app_name}",
        page_icon=page_icon,
        layout="centered",
    )
    st.title(f"{page_icon} {settings.app_name}")
    st.caption("Controle de Vendas")


def render_money_card(label: str, value: float, help_text: str | None = None) -> None:
    """Render a currency value as a metric card."""
    st.metric(label=label, value=format_currency(value), help=help_text)


def render_empty_state(message: str, detail: str | None = None, icon: str = "📅") -> None:
    """Render empty state placeholder when there is nothing to list.

    Args:
        message: Message to display
        detail: Optional second line
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")
    if detail:
        st.caption(detail)
