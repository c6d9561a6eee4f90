# tests/test_manager_engine.py

from fractions import Fraction

import pytest

from incentives.calculator import calculate_manager_incentive
from incentives.calculator.models import ManagerInput, TeamCategory
from incentives.calculator.utils import floor_to_two_decimals


def make_input(**overrides):
    # Policy example 1
    values = {
        'frozen_team_size': 9,
        'cohort_weeks': 4,
        'gross_sales': 42,
        'net_sales': 37,
        'non_discounted_net_sales': 18,
        'manager_coupon_net_sales': 12,
        'referral_net_sales': 7,
    }
    values.update(overrides)
    return ManagerInput(**values)


def only_non_discounted(team_size, net_sales, gross_sales):
    return make_input(
        frozen_team_size=team_size, gross_sales=gross_sales, net_sales=net_sales,
        non_discounted_net_sales=net_sales, manager_coupon_net_sales=0, referral_net_sales=0
    )


# --- Eligibility ---

@pytest.mark.parametrize('team_size', [0, 1, 4])
def test_not_eligible_when_team_size_below_five(team_size):
    result = calculate_manager_incentive(make_input(frozen_team_size=team_size))

    assert result.eligible is False
    assert result.net_productivity == 0
    assert result.team_category == TeamCategory.SMALL
    assert result.slab_label == ''
    assert result.final_incentive == 0
    assert result.gross_incentive == 0
    assert 'Team size must be at least 5' in result.message


def test_not_eligible_when_productivity_below_threshold_still_reports_metrics():
    # Productivity = 20/10/4 = 0.5
    result = calculate_manager_incentive(only_non_discounted(10, 20, 20))

    assert result.eligible is False
    assert result.net_productivity == 0.5
    assert result.team_category == '9-12'
    assert result.incentive_per_sale == 0
    assert result.final_incentive == 0
    assert result.gtn_percent == 0
    assert result.penalty_applied is False
    assert 'Net productivity must be at least 0.80' in result.message


def test_zero_sales_are_not_eligible():
    result = calculate_manager_incentive(make_input(
        frozen_team_size=10, gross_sales=0, net_sales=0, non_discounted_net_sales=0,
        manager_coupon_net_sales=0, referral_net_sales=0
    ))

    assert result.eligible is False
    assert result.net_productivity == 0


def test_non_positive_cohort_weeks_fail_closed():
    result = calculate_manager_incentive(make_input(cohort_weeks=0))

    assert result.eligible is False
    assert result.final_incentive == 0
    assert 'Cohort weeks must be positive' in result.message


# --- Productivity ---

def test_productivity_is_floored():
    # 37/9/4 = 1.0277...
    result = calculate_manager_incentive(make_input())
    assert result.net_productivity == 1.02


def test_productivity_is_floored_not_rounded():
    # 37/10/4 = 0.925 -> 0.92, not 0.93
    result = calculate_manager_incentive(only_non_discounted(10, 37, 50))
    assert result.net_productivity == 0.92
    assert result.slab_label == '0.91-0.95'


def test_productivity_truncation_is_exact():
    # 29/25/4 = 0.29 exactly; binary floating point would give 0.28
    result = calculate_manager_incentive(only_non_discounted(25, 29, 29))
    assert result.net_productivity == 0.29


def test_floor_to_two_decimals_truncates_the_exact_quotient():
    assert floor_to_two_decimals(Fraction(29, 25) / 4) == Fraction(29, 100)
    # flooring the float quotient instead lands one cent lower
    assert floor_to_two_decimals(29 / 25 / 4) == Fraction(28, 100)


def test_exact_productivity_boundary_is_eligible():
    # 32/10/4 = 0.8
    result = calculate_manager_incentive(only_non_discounted(10, 32, 32))

    assert result.net_productivity == 0.8
    assert result.eligible is True
    assert result.slab_label == '0.80-0.85'
    assert result.incentive_per_sale == 5000


# --- Team category ---

@pytest.mark.parametrize('team_size, net_sales, category', [
    (5, 20, '5-8'),
    (7, 28, '5-8'),
    (8, 32, '5-8'),
    (9, 36, '9-12'),
    (10, 40, '9-12'),
    (12, 48, '9-12'),
    (13, 52, '13+'),
    (15, 72, '13+'),
])
def test_team_category_boundaries(team_size, net_sales, category):
    result = calculate_manager_incentive(only_non_discounted(team_size, net_sales, net_sales))
    assert result.team_category == category


# --- Slab matching ---

@pytest.mark.parametrize('net_sales, slab, rate', [
    (32, '0.80-0.85', 5000),
    (34, '0.80-0.85', 5000),
    (35, '0.86-0.90', 6500),
    (37, '0.91-0.95', 8000),
    (39, '0.96-1.00', 9500),
    (40, '0.96-1.00', 9500),
    (41, '1.01-1.10', 11000),
    (45, '1.11-1.20', 13000),
    (49, '1.21-1.30', 15000),
    (80, '1.21-1.30', 15000),
])
def test_slab_matching_for_team_of_ten(net_sales, slab, rate):
    result = calculate_manager_incentive(only_non_discounted(10, net_sales, net_sales))

    assert result.slab_label == slab
    assert result.incentive_per_sale == rate


def test_top_slab_is_the_ceiling():
    # 48/8/4 = 1.5 -> 1.21-1.30 for 5-8 teams
    result = calculate_manager_incentive(only_non_discounted(8, 48, 50))

    assert result.slab_label == '1.21-1.30'
    assert result.incentive_per_sale == 12000


@pytest.mark.parametrize('team_size, net_sales, rate', [
    (6, 24, 7000),
    (11, 44, 9500),
    (14, 56, 11500),
])
def test_rate_grows_with_team_size(team_size, net_sales, rate):
    # productivity 1.00 in every case
    result = calculate_manager_incentive(only_non_discounted(team_size, net_sales, net_sales))

    assert result.slab_label == '0.96-1.00'
    assert result.incentive_per_sale == rate


# --- Breakdown ---

def test_policy_example_one():
    result = calculate_manager_incentive(make_input())

    assert result.eligible is True
    assert result.net_productivity == 1.02
    assert result.team_category == '9-12'
    assert result.slab_label == '1.01-1.10'
    assert result.incentive_per_sale == 11000
    assert result.breakdown_a == 198000
    assert result.breakdown_b == 132000
    # 7 * (11000 * 0.5)
    assert result.breakdown_c == 38500
    assert result.gross_incentive == 368500
    assert result.gtn_percent == 88.09
    assert result.penalty_applied is False
    assert result.penalty_amount == 0
    assert result.final_incentive == 368500
    assert result.message is None


def test_policy_example_two_with_penalty():
    result = calculate_manager_incentive(make_input(
        frozen_team_size=8, gross_sales=38, net_sales=30,
        non_discounted_net_sales=7, manager_coupon_net_sales=20, referral_net_sales=3
    ))

    # 30/8/4 = 0.9375
    assert result.net_productivity == 0.93
    assert result.slab_label == '0.91-0.95'
    assert result.incentive_per_sale == 6000
    assert result.breakdown_a == 42000
    assert result.breakdown_b == 120000
    assert result.breakdown_c == 9000
    assert result.gross_incentive == 171000
    # 30/38 = 78.947...
    assert result.gtn_percent == 78.94
    assert result.penalty_applied is True
    assert result.penalty_amount == 34200
    assert result.final_incentive == 136800


def test_referral_paid_at_half_rate():
    result = calculate_manager_incentive(make_input(
        frozen_team_size=10, gross_sales=50, net_sales=40,
        non_discounted_net_sales=0, manager_coupon_net_sales=0, referral_net_sales=40
    ))

    # 40/10/4 = 1.0 -> 9500 per sale
    assert result.incentive_per_sale == 9500
    assert result.breakdown_c == 190000
    assert result.gross_incentive == 190000


# --- GTN penalty ---

def test_no_penalty_at_exactly_eighty_percent():
    result = calculate_manager_incentive(only_non_discounted(10, 80, 100))

    assert result.gtn_percent == 80
    assert result.penalty_applied is False
    assert result.penalty_amount == 0
    assert result.final_incentive == result.gross_incentive


def test_penalty_just_below_eighty_percent():
    result = calculate_manager_incentive(only_non_discounted(10, 7999, 10000))

    assert result.gtn_percent == 79.99
    assert result.penalty_applied is True


def test_twenty_percent_penalty():
    # 75/10/4 = 1.875 -> top slab @ 15000; gross 1,125,000
    result = calculate_manager_incentive(only_non_discounted(10, 75, 100))

    assert result.gtn_percent == 75
    assert result.penalty_applied is True
    assert result.gross_incentive == 1125000
    assert result.penalty_amount == 225000
    assert result.final_incentive == 900000


def test_identical_inputs_give_identical_results():
    manager_input = make_input()
    assert calculate_manager_incentive(manager_input) == calculate_manager_incentive(manager_input)


def test_to_dict_unwraps_team_category():
    data = calculate_manager_incentive(make_input()).to_dict()

    assert data['team_category'] == '9-12'
    assert type(data['team_category']) is str
    assert data['final_incentive'] == 368500
