# ==============================================================================
# incentives/calculator/manager_engine.py
# ------------------------------------------------------------------------------
# Incentive calculation for managers: productivity slab, weighted breakdown
# and the gross-to-net (GTN) penalty.
# ==============================================================================

import logging
from fractions import Fraction

from .models import ManagerResult, TeamCategory
from .slabs import (TEAM_CATEGORIES, PRODUCTIVITY_SLABS, MANAGER_RATES, MANAGER_MIN_TEAM_SIZE,
                    MANAGER_MIN_PRODUCTIVITY, GTN_PENALTY_THRESHOLD, PENALTY_RATE,
                    REFERRAL_MULTIPLIER, match_slab)
from .utils import floor_to_two_decimals

TEAM_SIZE_MESSAGE = 'Not eligible: Team size must be at least 5 (non-probation members)'
PRODUCTIVITY_MESSAGE = 'Not eligible: Net productivity must be at least 0.80'
COHORT_WEEKS_MESSAGE = 'Not eligible: Cohort weeks must be positive'


def _not_eligible(message, net_productivity=0, team_category=TeamCategory.SMALL):
    return ManagerResult(
        eligible=False,
        net_productivity=float(net_productivity),
        team_category=team_category,
        slab_label='',
        incentive_per_sale=0,
        breakdown_a=0.0,
        breakdown_b=0.0,
        breakdown_c=0.0,
        gross_incentive=0.0,
        gtn_percent=0.0,
        penalty_applied=False,
        penalty_amount=0.0,
        final_incentive=0.0,
        message=message
    )


def calculate_manager_incentive(manager_input):
    """
    Calculates the incentive for a manager.

    Steps:
        1. Team size gate (at least 5 members).
        2. Net productivity = net sales / team size / cohort weeks, truncated
           to two decimals.
        3. Team category by team size.
        4. Productivity gate (at least 0.80).
        5. Rate lookup by team category and productivity slab.
        6. Breakdown: non-discounted (A) and manager coupon (B) sales at the
           full rate, referral sales (C) at half the rate.
        7. A 20% penalty when GTN is below 80%.

    Args:
        manager_input (ManagerInput): Validated input record.

    Returns:
        ManagerResult: A new result record. Ineligibility is reported through
            `eligible=False` and `message`, never raised.
    """
    if manager_input.frozen_team_size < MANAGER_MIN_TEAM_SIZE:
        logging.debug(f"Manager not eligible: team size {manager_input.frozen_team_size} < {MANAGER_MIN_TEAM_SIZE}.")
        return _not_eligible(TEAM_SIZE_MESSAGE)

    if manager_input.cohort_weeks < 1:
        logging.warning(f"Manager calculation received cohort_weeks={manager_input.cohort_weeks}; failing closed.")
        return _not_eligible(COHORT_WEEKS_MESSAGE)

    net_productivity = floor_to_two_decimals(
        Fraction(manager_input.net_sales, manager_input.frozen_team_size * manager_input.cohort_weeks)
    )
    team_category = match_slab(manager_input.frozen_team_size, TEAM_CATEGORIES).label

    slab = match_slab(net_productivity, PRODUCTIVITY_SLABS)
    if slab is None:
        logging.debug(f"Manager not eligible: productivity {float(net_productivity):.2f} < {float(MANAGER_MIN_PRODUCTIVITY):.2f}.")
        return _not_eligible(PRODUCTIVITY_MESSAGE, net_productivity, team_category)

    incentive_per_sale = MANAGER_RATES[team_category][slab.label]

    breakdown_a = floor_to_two_decimals(manager_input.non_discounted_net_sales * incentive_per_sale)
    breakdown_b = floor_to_two_decimals(manager_input.manager_coupon_net_sales * incentive_per_sale)
    breakdown_c = floor_to_two_decimals(manager_input.referral_net_sales * (REFERRAL_MULTIPLIER * incentive_per_sale))
    gross_incentive = floor_to_two_decimals(breakdown_a + breakdown_b + breakdown_c)

    if manager_input.gross_sales > 0:
        gtn_percent = floor_to_two_decimals(Fraction(manager_input.net_sales * 100, manager_input.gross_sales))
    else:
        gtn_percent = Fraction(0)

    penalty_applied = gtn_percent < GTN_PENALTY_THRESHOLD
    if penalty_applied:
        penalty_amount = floor_to_two_decimals(PENALTY_RATE * gross_incentive)
        final_incentive = floor_to_two_decimals(gross_incentive - penalty_amount)
    else:
        penalty_amount = Fraction(0)
        final_incentive = gross_incentive

    logging.debug(
        f"Manager team '{team_category.value}', productivity {float(net_productivity):.2f} -> slab '{slab.label}' @ {incentive_per_sale:,} | "
        f"A={float(breakdown_a):,.2f} B={float(breakdown_b):,.2f} C={float(breakdown_c):,.2f} gross={float(gross_incentive):,.2f} | "
        f"GTN={float(gtn_percent):.2f}% penalty={'YES' if penalty_applied else 'NO'} final={float(final_incentive):,.2f}"
    )

    return ManagerResult(
        eligible=True,
        net_productivity=float(net_productivity),
        team_category=team_category,
        slab_label=slab.label,
        incentive_per_sale=incentive_per_sale,
        breakdown_a=float(breakdown_a),
        breakdown_b=float(breakdown_b),
        breakdown_c=float(breakdown_c),
        gross_incentive=float(gross_incentive),
        gtn_percent=float(gtn_percent),
        penalty_applied=penalty_applied,
        penalty_amount=float(penalty_amount),
        final_incentive=float(final_incentive)
    )
