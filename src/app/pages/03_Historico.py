"""Sales History Page.

Sales grouped per day, with a two-step delete.
"""

from datetime import datetime, timedelta

import streamlit as st

from src.app.logic.confirmation import PendingConfirmation
from src.app.logic.data_loader import get_ledger
from src.app.logic.history import group_sales_by_day
from src.app.views.common import render_empty_state, setup_page
from src.app.views.history import render_history
from src.config.settings import settings

setup_page("Histórico", "📜")

ledger = get_ledger()

if "delete_confirmation" not in st.session_state:
    st.session_state["delete_confirmation"] = PendingConfirmation(
        timeout=timedelta(seconds=settings.delete_confirm_seconds)
    )
confirmation: PendingConfirmation = st.session_state["delete_confirmation"]


def on_delete_click(sale_id: str) -> None:
    if confirmation.click(sale_id, datetime.now()):
        ledger.delete_sale(sale_id)


groups = group_sales_by_day(ledger.data.sales)
if not groups:
    render_empty_state(
        "Nenhuma venda encontrada",
        "As vendas registradas aparecerão aqui.",
    )
    st.stop()

render_history(groups, confirmation.active_id(datetime.now()), on_delete_click)
