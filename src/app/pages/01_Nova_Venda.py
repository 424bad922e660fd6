"""New Sale Page.

Wiring layer connecting the sale form view to the ledger.
"""

from time import sleep

import streamlit as st

from src.app.logic.data_loader import get_ledger
from src.app.logic.sale_form import build_sale_observation, is_valid_sale_amount
from src.app.views.common import setup_page
from src.app.views.sale_form import render_sale_form, render_sale_success
from src.config.sale_form import load_sale_form_config
from src.config.settings import settings

setup_page("Nova Venda", "🍢")

ledger = get_ledger()
form_config = load_sale_form_config(settings.sale_form_config)

st.header("Nova Venda")
form_input = render_sale_form(form_config)

if form_input is not None:
    if not is_valid_sale_amount(form_input.amount, form_config):
        st.warning("Informe um valor maior que zero.")
        st.stop()

    observation = build_sale_observation(
        form_input.skewer_count, form_input.drink_quantities, form_config
    )
    ledger.add_sale(form_input.amount, form_input.payment_method, observation)
    render_sale_success()
    sleep(settings.success_delay_seconds)
    st.switch_page("00_Dashboard.py")

if st.button("✖️ Cancelar"):
    st.switch_page("00_Dashboard.py")
