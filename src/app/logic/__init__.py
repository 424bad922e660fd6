"""App logic package.

Business logic layer for Streamlit application.
Pure Python/Polars - no Streamlit UI calls.
"""

__all__ = ["capital", "confirmation", "dashboard", "data_loader", "history", "sale_form"]
