"""View components for the capital and expenses page."""

from collections.abc import Callable

import polars as pl
import streamlit as st

from src.core.formatting import format_currency


def render_capital_input(current_capital: float, on_change: Callable[[float], None]) -> None:
    """Opening cash input. Every change is saved immediately."""
    st.subheader("💼 Capital Inicial")
    st.caption("ABERTURA DE CAIXA")

    def _apply() -> None:
        on_change(float(st.session_state["capital_input"]))

    st.number_input(
        "Capital (R$)",
        value=float(current_capital),
        step=10.0,
        format="%.2f",
        key="capital_input",
        on_change=_apply,
    )


def render_expense_form() -> tuple[str, float] | None:
    """New expense form. Returns (description, amount) once submitted."""
    st.subheader("⬇️ Nova Saída")
    st.caption("Gelos, Bebidas, Carvão, etc")

    with st.form("expense_form", clear_on_submit=True):
        description = st.text_input("Descrição", placeholder="Descrição da despesa")
        amount = st.number_input(
            "Valor (R$)", min_value=0.0, value=0.0, step=1.0, format="%.2f"
        )
        submitted = st.form_submit_button("➕ Adicionar", type="primary")

    if not submitted:
        return None
    return description, float(amount)


def render_expense_list(df_expenses: pl.DataFrame, on_delete: Callable[[str], None]) -> None:
    if df_expenses.is_empty():
        return

    st.caption("LISTA DE SAÍDAS")
    for row in df_expenses.iter_rows(named=True):
        col_desc, col_amount, col_action = st.columns([5, 3, 1], vertical_alignment="center")
        with col_desc:
            st.markdown(f"**{row['description']}**  \n{row['time']}")
        with col_amount:
            st.markdown(f":red[**{format_currency(row['amount'])}**]")
        with col_action:
            if st.button("🗑️", key=f"delete_expense_{row['id']}"):
                on_delete(row["id"])
                st.rerun()
