"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import InvalidFormatError, InvalidValueError
from catalog.domain.model.value_objects import Price, ProductCode


# ── Price ────────────────────────────────────────────────────────────────────


class TestPriceCreation:

    def test_defaults_to_usd(self):
        p = Price.create(10)
        assert p.amount == Decimal("10.00")
        assert p.currency == "USD"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (10.555, Decimal("10.56")),
            ("19.999", Decimal("20.00")),
            (0.1, Decimal("0.10")),
            (0, Decimal("0.00")),
            (Decimal("3.14159"), Decimal("3.14")),
        ],
    )
    def test_rounds_to_two_decimals(self, raw, expected):
        assert Price.create(raw).amount == expected

    def test_currency_is_normalized(self):
        assert Price.create(5, "eur").currency == "EUR"

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidValueError, match="cannot be negative"):
            Price.create(-0.01)

    @pytest.mark.parametrize("raw", [float("inf"), float("nan"), "Infinity"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(InvalidValueError, match="valid number"):
            Price.create(raw)

    def test_unsupported_currency_rejected(self):
        with pytest.raises(InvalidValueError, match="Invalid currency: JPY"):
            Price.create(10, "JPY")

    def test_garbage_amount_rejected(self):
        with pytest.raises(InvalidValueError):
            Price.create("ten dollars")

    def test_zero(self):
        z = Price.zero("GBP")
        assert z.is_zero()
        assert not z.is_positive()
        assert z.currency == "GBP"


class TestPriceArithmetic:

    def test_add(self):
        assert Price.create("10").add(Price.create("5.50")) == Price.create("15.50")

    def test_subtract_self_is_zero(self):
        p = Price.create("42.42")
        assert p.subtract(p).amount == 0

    def test_subtract_larger_rejected(self):
        with pytest.raises(InvalidValueError, match="negative price"):
            Price.create(5).subtract(Price.create(10))

    def test_operators_delegate(self):
        assert Price.create(10) + Price.create(5) == Price.create(15)
        assert Price.create(10) - Price.create(4) == Price.create(6)
        assert Price.create("7.50") * 3 == Price.create("22.50")

    def test_multiply_negative_rejected(self):
        with pytest.raises(InvalidValueError, match="cannot be negative"):
            Price.create(10).multiply(-2)

    def test_divide_rounds(self):
        assert Price.create(10).divide(3).amount == Decimal("3.33")

    @pytest.mark.parametrize("divisor", [0, -1])
    def test_divide_by_non_positive_rejected(self, divisor):
        with pytest.raises(InvalidValueError, match="greater than zero"):
            Price.create(10).divide(divisor)

    def test_divide_by_infinity_rejected(self):
        with pytest.raises(InvalidValueError, match="valid number"):
            Price.create(10).divide(float("inf"))

    def test_discount(self):
        assert Price.create(100).apply_discount(25).amount == Decimal("75.00")

    @pytest.mark.parametrize("pct", [-1, 100.5])
    def test_discount_out_of_range_rejected(self, pct):
        with pytest.raises(InvalidValueError, match="between 0 and 100"):
            Price.create(100).apply_discount(pct)

    def test_tax(self):
        assert Price.create(100).apply_tax(16).amount == Decimal("116.00")

    def test_negative_tax_rejected(self):
        with pytest.raises(InvalidValueError, match="cannot be negative"):
            Price.create(100).apply_tax(-5)

    def test_operations_return_new_instances(self):
        p = Price.create(10)
        p.add(Price.create(1))
        p.apply_tax(50)
        assert p.amount == Decimal("10.00")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(InvalidValueError, match="different currencies"):
            Price.create(10, "USD").add(Price.create(5, "EUR"))

    def test_percentage_of(self):
        assert Price.create(25).calculate_percentage_of(Price.create(200)) == Decimal("12.5")

    def test_percentage_of_zero_total(self):
        assert Price.create(25).calculate_percentage_of(Price.zero()) == 0


class TestPriceComparison:

    def test_named_comparisons(self):
        small, big = Price.create(5), Price.create(10)
        assert big.is_greater_than(small)
        assert small.is_less_than(big)
        assert big.is_greater_than_or_equal(Price.create(10))
        assert small.is_less_than_or_equal(Price.create(5))

    def test_comparison_operators(self):
        assert Price.create(5) < Price.create(10)
        assert Price.create(10) > Price.create(5)
        assert Price.create(10) >= Price.create(10)
        assert Price.create(10) <= Price.create(10)

    def test_comparison_across_currencies_rejected(self):
        with pytest.raises(InvalidValueError, match="different currencies"):
            Price.create(5, "CAD").is_less_than(Price.create(5, "AUD"))

    def test_equals(self):
        assert Price.create("1.5").equals(Price.create("1.50"))
        assert not Price.create(1, "USD").equals(Price.create(1, "MXN"))


class TestPriceFormatting:

    @pytest.mark.parametrize(
        "currency, expected",
        [
            ("USD", "$9.50"),
            ("EUR", "€9.50"),
            ("GBP", "£9.50"),
            ("MXN", "$9.50"),
            ("CAD", "CA$9.50"),
            ("AUD", "A$9.50"),
        ],
    )
    def test_symbol_prefixed(self, currency, expected):
        assert Price.create("9.5", currency).formatted() == expected

    def test_with_currency_code(self):
        assert Price.create("3.1", "GBP").formatted_with_currency() == "GBP 3.10"

    def test_str(self):
        assert str(Price.create(15)) == "$15.00"


# ── ProductCode ──────────────────────────────────────────────────────────────


class TestProductCodeCreate:

    def test_normalizes_and_round_trips(self):
        code = ProductCode.create("lap-hp001")
        assert code.code == "LAP-HP001"
        assert str(code) == "LAP-HP001"

    def test_trims_whitespace(self):
        assert str(ProductCode.create("  abc-123 ")) == "ABC-123"

    def test_too_short_rejected(self):
        with pytest.raises(InvalidFormatError, match="too short"):
            ProductCode.create("AB-12")

    def test_too_long_rejected(self):
        with pytest.raises(InvalidFormatError, match="too long"):
            ProductCode.create("ABCDE-1234567")

    @pytest.mark.parametrize("raw", ["ABCDE-12", "ABC_1234", "AB-12345", "ABC-12$4"])
    def test_bad_pattern_rejected(self, raw):
        with pytest.raises(InvalidFormatError, match="Invalid product code format"):
            ProductCode.create(raw)

    def test_from_parts(self):
        assert str(ProductCode.create_from_parts("elec", "42a")) == "ELEC-42A"

    def test_from_parts_bad_prefix(self):
        with pytest.raises(InvalidFormatError, match="Invalid prefix"):
            ProductCode.create_from_parts("EL", "123")

    def test_from_parts_bad_suffix(self):
        with pytest.raises(InvalidFormatError, match="Invalid suffix"):
            ProductCode.create_from_parts("ELEC", "12")


class TestProductCodeGenerate:

    def test_generate_from_category(self):
        code = ProductCode.generate("electronics", 7)
        assert code.prefix == "ELEC"
        assert code.suffix == "000007"
        assert str(code) == "ELEC-000007"
        assert code.sequence == 7

    def test_short_category_padded(self):
        assert str(ProductCode.generate("tv", 1)) == "TVXX-000001"

    def test_category_without_alphanumerics(self):
        assert str(ProductCode.generate("!!!", 5)) == "PROD-000005"

    def test_category_punctuation_stripped(self):
        assert ProductCode.generate("home & garden", 1).prefix == "HOME"

    def test_empty_category_rejected(self):
        with pytest.raises(InvalidValueError, match="Category cannot be empty"):
            ProductCode.generate("  ", 1)

    @pytest.mark.parametrize("sequence", [-1, 1_000_000])
    def test_sequence_out_of_range_rejected(self, sequence):
        with pytest.raises(InvalidValueError, match="Sequence number"):
            ProductCode.generate("books", sequence)

    def test_bounds_accepted(self):
        assert ProductCode.generate("books", 0).suffix == "000000"
        assert ProductCode.generate("books", 999_999).suffix == "999999"


class TestProductCodeSequencing:

    def test_next_and_previous(self):
        code = ProductCode.generate("electronics", 7)
        assert str(code.next()) == "ELEC-000008"
        assert str(code.previous()) == "ELEC-000006"

    def test_previous_at_zero_rejected(self):
        with pytest.raises(InvalidValueError, match="sequence 0"):
            ProductCode.generate("books", 0).previous()

    def test_is_sequential(self):
        a = ProductCode.generate("books", 7)
        assert a.is_sequential(ProductCode.generate("books", 8))
        assert a.is_sequential(ProductCode.generate("books", 6))
        assert not a.is_sequential(ProductCode.generate("books", 9))
        assert not a.is_sequential(ProductCode.generate("music", 8))

    def test_non_numeric_suffix_is_not_sequential(self):
        assert not ProductCode.create("LAP-HP001").is_sequential(ProductCode.create("LAP-HP002"))

    def test_sequence_of_non_numeric_suffix_rejected(self):
        with pytest.raises(InvalidFormatError, match="no numeric sequence"):
            ProductCode.create("LAP-HP001").sequence


class TestProductCodeQueries:

    def test_belongs_to_category(self):
        code = ProductCode.generate("electronics", 1)
        assert code.belongs_to_category("Electronics")
        assert not code.belongs_to_category("books")

    def test_category_is_prefix(self):
        assert ProductCode.create("lap-hp001").category == "LAP"

    def test_matches(self):
        code = ProductCode.create("ELEC-000123")
        assert code.matches(r"^ELEC-\d+$")
        assert code.matches("elec")

    def test_matches_invalid_regex_is_false(self):
        assert not ProductCode.create("ELEC-000123").matches("[")

    def test_starts_with(self):
        assert ProductCode.create("ELEC-000123").starts_with(" elec")

    def test_equality(self):
        assert ProductCode.create("abc-123").equals(ProductCode.create("ABC-123"))
        assert ProductCode.create("abc-123") == ProductCode("ABC-123")


class TestPriceCentBoundary:

    @pytest.mark.parametrize("raw", ["-0.001", "-0.004", -0.005])
    def test_tiny_negative_rejected_before_rounding(self, raw):
        with pytest.raises(InvalidValueError, match="cannot be negative"):
            Price.create(raw)
