from dataclasses import dataclass

import streamlit as st

from src.app.views.colors import PAYMENT_METHOD_ICON
from src.config.sale_form import SaleFormConfig
from src.core.domain_models import PaymentMethod


@dataclass
class SaleFormInput:
    amount: float
    payment_method: PaymentMethod
    skewer_count: int
    drink_quantities: dict[str, int]


def _payment_label(method: PaymentMethod) -> str:
    label = "Pix" if method == PaymentMethod.PIX else "Dinheiro"
    return f"{PAYMENT_METHOD_ICON[method.value]} {label}"


def render_sale_form(config: SaleFormConfig) -> SaleFormInput | None:
    """Render the sale form. Returns the entered values once submitted."""
    with st.form("sale_form", clear_on_submit=True):
        amount = st.number_input(
            "Valor da Venda (R$)",
            min_value=0.0,
            max_value=config.max_amount,
            value=0.0,
            step=1.0,
            format="%.2f",
        )
        payment_method = st.radio(
            "Forma de Pagamento",
            options=list(PaymentMethod),
            format_func=_payment_label,
            horizontal=True,
        )
        skewer_count = st.number_input(
            "Quantidade de Espetinhos", min_value=0, value=0, step=1
        )

        st.markdown("**Bebidas Vendidas**")
        drink_quantities: dict[str, int] = {}
        cols = st.columns(2)
        for i, option in enumerate(config.drinks):
            with cols[i % 2]:
                drink_quantities[option.id] = int(
                    st.number_input(
                        f"🥤 {option.label}",
                        min_value=0,
                        value=0,
                        step=1,
                        key=f"drink_{option.id}",
                    )
                )

        submitted = st.form_submit_button(
            "REGISTRAR VENDA", type="primary", use_container_width=True
        )

    if not submitted:
        return None
    return SaleFormInput(
        amount=float(amount),
        payment_method=payment_method,
        skewer_count=int(skewer_count),
        drink_quantities=drink_quantities,
    )


def render_sale_success() -> None:
    st.success("✅ **Venda Registrada!** Seu dashboard foi atualizado.")
