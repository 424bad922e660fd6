"""View components for the dashboard page.

Renders profit, break-even goal, sales totals and the payment split.
"""

import plotly.graph_objects as go
import polars as pl
import streamlit as st

from src.app.logic.dashboard import get_break_even_split, get_payment_distribution
from src.app.views.colors import PAYMENT_METHOD_COLOR_MAP, Colors, goal_color, profit_color
from src.app.views.common import GLOBAL_FONT, GLOBAL_MARGINS, render_money_card
from src.core.domain_models import DashboardStats
from src.core.formatting import format_currency


def make_break_even_donut(stats: DashboardStats) -> go.Figure:
    df_split = get_break_even_split(stats)
    percentage = stats.break_even_percentage
    fig = go.Figure(
        go.Pie(
            labels=df_split["segment"].to_list(),
            values=df_split["value"].to_list(),
            hole=0.75,
            sort=False,
            direction="clockwise",
            textinfo="none",
            hoverinfo="skip",
            marker=dict(colors=[goal_color(percentage), Colors.zinc_800]),
        )
    )
    fig.update_layout(
        height=160,
        margin=GLOBAL_MARGINS,
        showlegend=False,
        font=GLOBAL_FONT,
        paper_bgcolor="rgba(0,0,0,0)",
        annotations=[
            dict(
                text=f"META<br><b>{round(percentage)}%</b>",
                showarrow=False,
                font=dict(size=16),
            )
        ],
    )
    return fig


def make_payment_distribution_bar(df_distribution: pl.DataFrame) -> go.Figure:
    fig = go.Figure()
    for row in df_distribution.iter_rows(named=True):
        fig.add_trace(
            go.Bar(
                x=[row["share"]],
                y=["pagamentos"],
                orientation="h",
                name=row["payment_method"],
                marker_color=PAYMENT_METHOD_COLOR_MAP[row["payment_method"]],
                hovertemplate=(
                    f"{row['payment_method']}: {format_currency(row['amount'])}<extra></extra>"
                ),
            )
        )
    fig.update_layout(
        barmode="stack",
        height=70,
        margin=dict(t=0, l=0, r=0, b=0),
        showlegend=False,
        font=GLOBAL_FONT,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(visible=False, range=[0, 100]),
        yaxis=dict(visible=False),
    )
    return fig


def render_profit_card(stats: DashboardStats) -> None:
    """Net profit with the invested total and the break-even ring."""
    col1, col2 = st.columns([3, 2], vertical_alignment="center")
    with col1:
        trend = "📈" if stats.profit >= 0 else "📉"
        st.caption("LUCRO LÍQUIDO")
        st.markdown(
            f"<h2 style='color: {profit_color(stats.profit)}; margin: 0'>"
            f"{format_currency(stats.profit)}</h2>",
            unsafe_allow_html=True,
        )
        st.caption(f"{trend} Investimento: {format_currency(stats.total_out)}")
    with col2:
        st.plotly_chart(
            make_break_even_donut(stats),
            use_container_width=True,
            config={"displayModeBar": False},
            key="break_even_donut",
        )


def render_sales_totals(stats: DashboardStats) -> None:
    col1, col2 = st.columns(2)
    with col1:
        render_money_card("Vendido Hoje", stats.total_sales_today)
    with col2:
        render_money_card(
            "Total FDS",
            stats.total_sales_weekend,
            help_text="Vendas de sexta, sábado e domingo",
        )


def render_payment_distribution(stats: DashboardStats) -> None:
    st.caption("MEIOS DE PAGAMENTO")
    st.markdown(f"**{stats.sales_count} vendas totais**")
    st.plotly_chart(
        make_payment_distribution_bar(get_payment_distribution(stats)),
        use_container_width=True,
        config={"displayModeBar": False},
        key="payment_distribution",
    )
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"🔴 **PIX** ({format_currency(stats.total_pix)})")
    with col2:
        st.markdown(f"⚫ **DINHEIRO** ({format_currency(stats.total_cash)})")


def render_secondary_metrics(stats: DashboardStats) -> None:
    col1, col2 = st.columns(2)
    with col1:
        render_money_card("🛍️ Saídas Extras", stats.total_expenses)
    with col2:
        render_money_card("💳 Ticket Médio", stats.average_ticket)
