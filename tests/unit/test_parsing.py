"""Unit tests for asesor.utils.parsing module."""

from asesor.utils.parsing import (
    format_patrimony_distribution,
    parse_patrimony_distribution,
    parse_percentage,
    parse_products_used,
)


class TestParsePatrimonyDistribution:
    """Tests for 'categoria:valor' parsing."""

    def test_basic(self):
        result = parse_patrimony_distribution("efectivo:30, renta fija:40, acciones:30")
        assert result == {"efectivo": 30, "renta fija": 40, "acciones": 30}

    def test_blank(self):
        assert parse_patrimony_distribution("") == {}
        assert parse_patrimony_distribution("   ") == {}
        assert parse_patrimony_distribution(None) == {}

    def test_non_integer_value_is_zero(self):
        assert parse_patrimony_distribution("efectivo:mucho, cdt:12.5") == {"efectivo": 0, "cdt": 0}

    def test_malformed_items_skipped(self):
        result = parse_patrimony_distribution("efectivo, :20, a:b:c, acciones: 70")
        assert result == {"acciones": 70}

    def test_empty_value_is_zero(self):
        assert parse_patrimony_distribution("efectivo:") == {"efectivo": 0}

    def test_later_duplicate_wins(self):
        assert parse_patrimony_distribution("efectivo:10, efectivo:20") == {"efectivo": 20}

    def test_no_sum_check(self):
        assert parse_patrimony_distribution("a:90, b:90") == {"a": 90, "b": 90}

    def test_negative_values_kept(self):
        assert parse_patrimony_distribution("deuda:-15") == {"deuda": -15}

    def test_only_plain_integers(self):
        """Underscored, non-ASCII or out-of-range numbers read as 0."""
        result = parse_patrimony_distribution("a:1_000, b:\u0663\u0660, c:99999999999, d:+25")
        assert result == {"a": 0, "b": 0, "c": 0, "d": 25}


class TestParsePercentage:

    def test_plain(self):
        assert parse_percentage("40") == 40
        assert parse_percentage("-7") == -7
        assert parse_percentage("+3") == 3

    def test_rejected(self):
        for text in ("", "1_0", "12.5", "1e3", "\uff15", "- 5"):
            assert parse_percentage(text) == 0

    def test_int_bounds(self):
        assert parse_percentage("2147483647") == 2147483647
        assert parse_percentage("2147483648") == 0
        assert parse_percentage("-2147483648") == -2147483648


class TestFormatPatrimonyDistribution:

    def test_format(self):
        assert format_patrimony_distribution({"efectivo": 30, "acciones": 70}) == "efectivo:30, acciones:70"

    def test_empty(self):
        assert format_patrimony_distribution({}) == ""

    def test_parse_of_format(self):
        mapping = {"renta fija": 40, "otros": 0}
        assert parse_patrimony_distribution(format_patrimony_distribution(mapping)) == mapping


class TestParseProductsUsed:

    def test_split_and_trim(self):
        assert parse_products_used("CDT, FIC ,TES, , ETFs") == ["CDT", "FIC", "TES", "ETFs"]

    def test_empty(self):
        assert parse_products_used("") == []
        assert parse_products_used(None) == []
