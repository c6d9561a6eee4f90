# ==============================================================================
# incentives/calculator/slabs.py
# ------------------------------------------------------------------------------
# Static slab tables for the incentive policy.
# These tables are the single source of truth for every bracket lookup.
# Each table is ordered by threshold, highest first.
# ==============================================================================

from collections import namedtuple
from fractions import Fraction

from .models import TeamCategory

Slab = namedtuple('Slab', ['threshold', 'label', 'rate'])

# --- IC (Non-Probation) ---
# Net sales below the last threshold are not eligible.
IC_SLABS = (
    Slab(18, '18+', 30000),
    Slab(16, '16-17', 27500),
    Slab(14, '14-15', 25000),
    Slab(12, '12-13', 22500),
    Slab(10, '10-11', 20000),
    Slab(8, '8-9', 17500),
    Slab(6, '6-7', 15000),
    Slab(4, '4-5', 12500),
)

IC_PROBATION_RATE = 5000
IC_REFERRAL_FLAT_RATE = 5000
IC_MANAGER_COUPON_FLAT_RATE = 10000

# --- Manager ---
MANAGER_MIN_TEAM_SIZE = 5

TEAM_CATEGORIES = (
    Slab(13, TeamCategory.LARGE, None),
    Slab(9, TeamCategory.MEDIUM, None),
    Slab(MANAGER_MIN_TEAM_SIZE, TeamCategory.SMALL, None),
)

# 1.21-1.30 is the ceiling for any productivity of 1.21 or more.
PRODUCTIVITY_SLABS = (
    Slab(Fraction('1.21'), '1.21-1.30', None),
    Slab(Fraction('1.11'), '1.11-1.20', None),
    Slab(Fraction('1.01'), '1.01-1.10', None),
    Slab(Fraction('0.96'), '0.96-1.00', None),
    Slab(Fraction('0.91'), '0.91-0.95', None),
    Slab(Fraction('0.86'), '0.86-0.90', None),
    Slab(Fraction('0.80'), '0.80-0.85', None),
)

MANAGER_MIN_PRODUCTIVITY = PRODUCTIVITY_SLABS[-1].threshold

# Incentive per sale by team category and productivity slab.
MANAGER_RATES = {
    TeamCategory.SMALL: {
        '0.80-0.85': 4000,
        '0.86-0.90': 5000,
        '0.91-0.95': 6000,
        '0.96-1.00': 7000,
        '1.01-1.10': 8000,
        '1.11-1.20': 10000,
        '1.21-1.30': 12000,
    },
    TeamCategory.MEDIUM: {
        '0.80-0.85': 5000,
        '0.86-0.90': 6500,
        '0.91-0.95': 8000,
        '0.96-1.00': 9500,
        '1.01-1.10': 11000,
        '1.11-1.20': 13000,
        '1.21-1.30': 15000,
    },
    TeamCategory.LARGE: {
        '0.80-0.85': 7000,
        '0.86-0.90': 8500,
        '0.91-0.95': 10000,
        '0.96-1.00': 11500,
        '1.01-1.10': 13000,
        '1.11-1.20': 15000,
        '1.21-1.30': 20000,
    },
}

GTN_PENALTY_THRESHOLD = 80
PENALTY_RATE = Fraction(1, 5)
REFERRAL_MULTIPLIER = Fraction(1, 2)


def match_slab(value, slabs):
    """
    Returns the first slab whose threshold is at or below value, or None.
    Values between two thresholds fall into the lower-bound slab.
    """
    for slab in slabs:
        if value >= slab.threshold:
            return slab
    return None
