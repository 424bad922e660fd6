"""CB Controle Dashboard - Main Entry Point.

Live profitability view of the stall.
Navigate to the other pages using the sidebar.
"""

import streamlit as st
from loguru import logger

from src.app.logic.data_loader import get_ledger
from src.app.views.common import setup_page
from src.app.views.dashboard import (
    render_payment_distribution,
    render_profit_card,
    render_sales_totals,
    render_secondary_metrics,
)

setup_page("Dashboard", "📊")

try:
    ledger = get_ledger()
    stats = ledger.stats()
except Exception as e:
    st.error(f"Falha ao carregar os dados: {e}")
    logger.error(f"Dashboard loading error: {e}", exc_info=True)
    raise e

render_profit_card(stats)
st.divider()
render_sales_totals(stats)
st.divider()
render_payment_distribution(stats)
st.divider()
render_secondary_metrics(stats)

if st.button("➕ Nova Venda", type="primary", use_container_width=True):
    st.switch_page("pages/01_Nova_Venda.py")
