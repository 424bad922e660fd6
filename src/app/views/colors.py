# Define a static color class for consistent use across the app


class Colors:
    # Brand (stall red on dark background)
    red = "#dc2626"  # Red 600
    dark_red = "#7f1d1d"  # Red 900, loss background
    light_red = "#f87171"  # Red 400, expense amounts

    # Semantic: Profit / goal reached
    yellow = "#facc15"  # Yellow 400
    amber = "#f59e0b"  # Amber 500

    # Payment methods
    cyan = "#22d3ee"  # PIX
    green = "#4ade80"  # Cash

    # Neutrals (zinc scale)
    zinc_900 = "#18181b"
    zinc_800 = "#27272a"
    zinc_600 = "#52525b"
    zinc_500 = "#71717a"
    zinc_300 = "#d4d4d8"
    white = "#ffffff"


# Payment distribution bar: PIX highlighted, cash neutral
PAYMENT_METHOD_COLOR_MAP = {
    "PIX": Colors.red,
    "DINHEIRO": Colors.zinc_600,
}

PAYMENT_METHOD_ICON = {
    "PIX": "💳",
    "DINHEIRO": "💵",
}


def profit_color(profit: float) -> str:
    """Yellow when profitable, red otherwise."""
    return Colors.yellow if profit >= 0 else Colors.red


def goal_color(percentage: float) -> str:
    return Colors.yellow if percentage >= 100 else Colors.red
