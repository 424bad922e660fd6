"""View components for the sales history page."""

from collections.abc import Callable

import streamlit as st

from src.app.logic.history import DayGroup
from src.app.views.colors import PAYMENT_METHOD_ICON
from src.core.domain_models import Sale
from src.core.formatting import format_currency, format_time


def render_day_header(group: DayGroup) -> None:
    col1, col2 = st.columns([3, 2])
    with col1:
        st.caption(group.day_name.upper())
        st.markdown(f"**{group.date_label}**")
    with col2:
        st.caption("TOTAL DO DIA")
        st.markdown(f":red[**{format_currency(group.total)}**]")


def render_sale_row(sale: Sale, is_armed: bool, on_delete_click: Callable[[str], None]) -> None:
    """One sale line. An armed row shows the confirm button instead of the trash icon."""
    col_icon, col_info, col_action = st.columns([1, 6, 2], vertical_alignment="center")
    with col_icon:
        st.markdown(PAYMENT_METHOD_ICON[sale.payment_method.value])
    with col_info:
        details = sale.observation or "Sem detalhes"
        st.markdown(f"**{format_currency(sale.amount)}**  \n{format_time(sale.timestamp)} • {details}")
    with col_action:
        label = "⚠️ Confirmar?" if is_armed else "🗑️"
        button_type = "primary" if is_armed else "secondary"
        if st.button(label, key=f"delete_sale_{sale.id}", type=button_type):
            on_delete_click(sale.id)
            st.rerun()


def render_history(
    groups: list[DayGroup],
    armed_id: str | None,
    on_delete_click: Callable[[str], None],
) -> None:
    st.header("Histórico de Vendas")
    for group in groups:
        render_day_header(group)
        for sale in group.sales:
            render_sale_row(sale, sale.id == armed_id, on_delete_click)
        st.divider()
