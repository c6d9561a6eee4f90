# ==============================================================================
# incentives/main/filters.py
# ------------------------------------------------------------------------------
# Defines custom Jinja2 template filters for the application.
# ==============================================================================

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from incentives.main import bp

@bp.app_template_filter('inr')
def inr_filter(amount):
    """
    Formats an amount as Indian Rupees with lakh/crore grouping and no decimals.
    Example: 1234567 -> "₹12,34,567"
    """
    try:
        value = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError, TypeError):
        return amount

    sign = '-' if value < 0 else ''
    digits = str(abs(value))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        groups.insert(0, head)
        digits = ','.join(groups) + ',' + tail
    return f"{sign}₹{digits}"

@bp.app_template_filter('decimal2')
def decimal2_filter(value):
    """Formats a number with exactly two decimals. Example: 1.5 -> "1.50" """
    try:
        return f"{float(value):.2f}"
    except (ValueError, TypeError):
        return value
