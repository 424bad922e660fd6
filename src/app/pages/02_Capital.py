"""Capital & Expenses Page.

Wiring layer for the opening cash and the list of cash outflows.
"""

import streamlit as st

from src.app.logic.capital import expenses_to_frame, is_valid_expense
from src.app.logic.data_loader import get_ledger
from src.app.views.capital import (
    render_capital_input,
    render_expense_form,
    render_expense_list,
)
from src.app.views.common import setup_page

setup_page("Capital", "💼")

ledger = get_ledger()

render_capital_input(ledger.data.initial_capital, ledger.update_capital)
st.divider()

expense_input = render_expense_form()
if expense_input is not None:
    description, amount = expense_input
    if is_valid_expense(description, amount):
        ledger.add_expense(description, amount)
    else:
        st.warning("Informe uma descrição e um valor maior que zero.")

render_expense_list(expenses_to_frame(ledger.data.expenses), ledger.delete_expense)
