# ==============================================================================
# incentives/main/utils.py
# ------------------------------------------------------------------------------
# Turns calculator results into the rows of the "How this was calculated"
# panel. Amounts stay numeric; templates format them with the 'inr' filter.
# ==============================================================================

from incentives.calculator.slabs import GTN_PENALTY_THRESHOLD, PENALTY_RATE, REFERRAL_MULTIPLIER
from incentives.main.filters import inr_filter


def manager_breakdown_rows(manager_input, result):
    """
    Builds the breakdown rows for an eligible manager result.

    Returns:
        list: Dicts with 'label', 'amount' and an optional 'kind'
            ('total', 'penalty' or 'percent') used for styling.
    """
    if not result.eligible:
        return []

    rate = result.incentive_per_sale
    referral_rate = float(REFERRAL_MULTIPLIER * rate)
    rows = [
        {'label': 'Incentive per sale', 'amount': rate},
        {'label': f"A. Non-discounted ({manager_input.non_discounted_net_sales} × {inr_filter(rate)})",
         'amount': result.breakdown_a},
        {'label': f"B. Manager coupon ({manager_input.manager_coupon_net_sales} × {inr_filter(rate)})",
         'amount': result.breakdown_b},
        {'label': f"C. Referral ({manager_input.referral_net_sales} × {inr_filter(referral_rate)})",
         'amount': result.breakdown_c},
        {'label': 'Gross Incentive (A + B + C)', 'amount': result.gross_incentive, 'kind': 'total'},
        {'label': 'GTN%', 'amount': result.gtn_percent, 'kind': 'percent'},
    ]
    if result.penalty_applied:
        rows.append({
            'label': f"Penalty ({float(PENALTY_RATE):.0%} for GTN < {GTN_PENALTY_THRESHOLD}%)",
            'amount': -result.penalty_amount,
            'kind': 'penalty'
        })
    rows.append({'label': 'Final Incentive', 'amount': result.final_incentive, 'kind': 'total'})
    return rows


def ic_breakdown_rows(ic_input, result):
    """Builds the breakdown rows for an eligible IC result."""
    if not result.eligible:
        return []

    rows = [
        {'label': f"Non-discounted ({ic_input.non_discounted_net_sales} × {inr_filter(result.incentive_per_non_discounted_sale)})",
         'amount': result.non_discounted_incentive},
        {'label': f"Referral ({ic_input.referral_sales_count} sales)", 'amount': result.referral_incentive},
        {'label': f"Manager coupon ({ic_input.manager_coupon_sales_count} sales)", 'amount': result.manager_coupon_incentive},
        {'label': 'Total Incentive', 'amount': result.total_incentive, 'kind': 'total'},
    ]
    return rows
