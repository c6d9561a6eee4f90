# ==============================================================================
# incentives/calculator/models.py
# ------------------------------------------------------------------------------
# Input and result records for both calculators. Records are immutable and are
# created fresh on every call.
# ==============================================================================

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class EmploymentStatus(str, Enum):
    PROBATION = 'Probation'
    NON_PROBATION = 'Non-Probation'


class TeamCategory(str, Enum):
    SMALL = '5-8'
    MEDIUM = '9-12'
    LARGE = '13+'


def _plain(record):
    """Converts a result record to a JSON-ready dict with enum values unwrapped."""
    data = asdict(record)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
    return data


@dataclass(frozen=True)
class ICInput:
    employment_status: EmploymentStatus
    cohort_weeks: int
    net_sales: int
    non_discounted_net_sales: int
    referral_sales_count: int
    manager_coupon_sales_count: int


@dataclass(frozen=True)
class ICResult:
    eligible: bool
    net_sales: int
    slab_label: str
    incentive_per_non_discounted_sale: int
    non_discounted_incentive: int
    referral_incentive: int
    manager_coupon_incentive: int
    total_incentive: int
    message: Optional[str] = None

    def to_dict(self):
        return _plain(self)


@dataclass(frozen=True)
class ManagerInput:
    frozen_team_size: int
    cohort_weeks: int
    gross_sales: int
    net_sales: int
    non_discounted_net_sales: int
    manager_coupon_net_sales: int
    referral_net_sales: int


@dataclass(frozen=True)
class ManagerResult:
    """
    Outcome of a manager calculation. breakdown_a, breakdown_b and breakdown_c
    are the non-discounted, manager coupon and referral components.
    """
    eligible: bool
    net_productivity: float
    team_category: TeamCategory
    slab_label: str
    incentive_per_sale: int
    breakdown_a: float
    breakdown_b: float
    breakdown_c: float
    gross_incentive: float
    gtn_percent: float
    penalty_applied: bool
    penalty_amount: float
    final_incentive: float
    message: Optional[str] = None

    def to_dict(self):
        return _plain(self)
