"""Unit tests for CreditCalculator

Tests cover:
- Normal and express credits from base credits
- Unknown output types cost nothing
- Fractional base credits
"""

from decimal import Decimal

from creative_boost.domain.credit_calculator import CreditCalculator, EXPRESS_MULTIPLIER
from tests.unit.factories import make_output_type


class TestCreditCalculator:
    def test_normal_and_express_credits(self):
        """
        Given: Output type with base_credits 2
        When: 3 normal and 2 express pieces are calculated
        Then: normal 6, express 6 (2 * 2 * 1.5), total 12
        """
        calculator = CreditCalculator([make_output_type(base_credits="2")])

        credits = calculator.calculate_output_credits("type_banner", 3, 2)

        assert credits.normal_credits == Decimal("6")
        assert credits.express_credits == Decimal("6")
        assert credits.total_credits == Decimal("12")

    def test_express_multiplier_is_one_and_a_half(self):
        assert EXPRESS_MULTIPLIER == Decimal("1.5")

    def test_unknown_output_type_costs_zero(self):
        calculator = CreditCalculator([make_output_type()])

        credits = calculator.calculate_output_credits("type_missing", 10, 4)

        assert credits.normal_credits == Decimal("0")
        assert credits.express_credits == Decimal("0")
        assert credits.total_credits == Decimal("0")

    def test_missing_output_type_id_costs_zero(self):
        calculator = CreditCalculator([make_output_type()])

        credits = calculator.calculate_output_credits(None, 1, 1)

        assert credits.total_credits == Decimal("0")

    def test_fractional_base_credits(self):
        calculator = CreditCalculator([make_output_type(id="type_revision", base_credits="0.5")])

        credits = calculator.calculate_output_credits("type_revision", 3, 1)

        assert credits.normal_credits == Decimal("1.5")
        assert credits.express_credits == Decimal("0.75")
        assert credits.total_credits == Decimal("2.25")

    def test_get_base_credits(self):
        calculator = CreditCalculator([make_output_type(id="type_video", base_credits="4")])

        assert calculator.get_base_credits("type_video") == Decimal("4")
        assert calculator.get_base_credits("type_missing") == Decimal("0")
