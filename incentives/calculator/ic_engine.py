# ==============================================================================
# incentives/calculator/ic_engine.py
# ------------------------------------------------------------------------------
# Incentive calculation for individual contributors (ICs).
# ==============================================================================

import logging

from .models import EmploymentStatus, ICResult
from .slabs import (IC_SLABS, IC_PROBATION_RATE, IC_REFERRAL_FLAT_RATE,
                    IC_MANAGER_COUPON_FLAT_RATE, match_slab)

PROBATION_MESSAGE = 'Probation: Only non-discounted net sales are incentivized'
MIN_NET_SALES_MESSAGE = 'Not eligible: Net sales must be at least 4 for the 4-week cohort'


def calculate_ic_incentive(ic_input):
    """
    Calculates the incentive for an individual contributor.

    Probation ICs earn a flat rate on non-discounted net sales only. Everyone
    else is placed in a slab by net sales; the slab rate applies to
    non-discounted sales, while referral and manager coupon sales earn flat
    amounts that do not depend on the slab.

    Args:
        ic_input (ICInput): Validated input record.

    Returns:
        ICResult: A new result record. Ineligibility is reported through
            `eligible=False` and `message`, never raised.
    """
    if ic_input.employment_status == EmploymentStatus.PROBATION:
        non_discounted_incentive = ic_input.non_discounted_net_sales * IC_PROBATION_RATE
        logging.debug(f"IC on probation: {ic_input.non_discounted_net_sales} x {IC_PROBATION_RATE} = {non_discounted_incentive:,}")
        return ICResult(
            eligible=True,
            net_sales=ic_input.net_sales,
            slab_label='Probation',
            incentive_per_non_discounted_sale=IC_PROBATION_RATE,
            non_discounted_incentive=non_discounted_incentive,
            referral_incentive=0,
            manager_coupon_incentive=0,
            total_incentive=non_discounted_incentive,
            message=PROBATION_MESSAGE
        )

    slab = match_slab(ic_input.net_sales, IC_SLABS)
    if slab is None:
        logging.debug(f"IC not eligible: net sales {ic_input.net_sales} below the lowest slab.")
        return ICResult(
            eligible=False,
            net_sales=ic_input.net_sales,
            slab_label='',
            incentive_per_non_discounted_sale=0,
            non_discounted_incentive=0,
            referral_incentive=0,
            manager_coupon_incentive=0,
            total_incentive=0,
            message=MIN_NET_SALES_MESSAGE
        )

    non_discounted_incentive = ic_input.non_discounted_net_sales * slab.rate
    referral_incentive = ic_input.referral_sales_count * IC_REFERRAL_FLAT_RATE
    manager_coupon_incentive = ic_input.manager_coupon_sales_count * IC_MANAGER_COUPON_FLAT_RATE
    total_incentive = non_discounted_incentive + referral_incentive + manager_coupon_incentive

    logging.debug(
        f"IC slab '{slab.label}' @ {slab.rate:,} | non-discounted={non_discounted_incentive:,} "
        f"referral={referral_incentive:,} coupon={manager_coupon_incentive:,} total={total_incentive:,}"
    )

    return ICResult(
        eligible=True,
        net_sales=ic_input.net_sales,
        slab_label=slab.label,
        incentive_per_non_discounted_sale=slab.rate,
        non_discounted_incentive=non_discounted_incentive,
        referral_incentive=referral_incentive,
        manager_coupon_incentive=manager_coupon_incentive,
        total_incentive=total_incentive
    )
