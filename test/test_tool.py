"""
Test per le funzioni di formattazione FatturaPA
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fatturapa.services.core.tool import (
    escape_xml, format_amount, format_date, format_quantity, progressivo_invio, to_decimal
)


class TestFormatAmount:

    @pytest.mark.parametrize("value, expected", [
        (1000, "1000.00"),
        ("1000", "1000.00"),
        (1220.5, "1220.50"),
        ("1220.50", "1220.50"),
        (Decimal("22"), "22.00"),
        (" 12 ", "12.00"),
        ("0", "0.00"),
        ("-15.5", "-15.50"),
    ])
    def test_two_decimals(self, value, expected):
        assert format_amount(value) == expected

    def test_half_up_rounding(self):
        """Arrotondamento commerciale: 2.005 -> 2.01"""
        assert format_amount("2.005") == "2.01"
        assert format_amount("2.004") == "2.00"

    def test_float_without_binary_artifacts(self):
        assert format_amount(0.1 + 0.2) == "0.30"

    def test_large_amount_not_in_exponent_notation(self):
        assert format_amount("1E+3") == "1000.00"

    @pytest.mark.parametrize("value", ["abc", "", None, True, float("nan"), "Infinity", [1]])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            format_amount(value)

    @pytest.mark.parametrize("value", ["1" + "0" * 27, "1E+26", Decimal("-1E+18"), 10 ** 30])
    def test_out_of_range_values(self, value):
        """Importi oltre le 18 cifre intere: ValueError, non InvalidOperation"""
        with pytest.raises(ValueError):
            format_amount(value)

    def test_largest_accepted_amount(self):
        assert format_amount("9" * 18) == "9" * 18 + ".00"

    def test_quantity_same_format(self):
        assert format_quantity(10) == "10.00"
        assert format_quantity("2.5") == "2.50"


class TestToDecimal:

    def test_float_uses_shortest_repr(self):
        assert to_decimal(1220.5) == Decimal("1220.5")

    def test_string_is_stripped(self):
        assert to_decimal(" 3.14 ") == Decimal("3.14")

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="fuori intervallo"):
            to_decimal("1" + "0" * 27)


class TestProgressivoInvio:

    def test_removes_non_alphanumeric(self):
        assert progressivo_invio("FT-2026/001") == "FT2026001"

    def test_truncated_to_ten_characters(self):
        assert progressivo_invio("FATTURA-2026/0001") == "FATTURA202"

    def test_only_symbols(self):
        assert progressivo_invio("--/--") == ""

    def test_accented_letters_removed(self):
        assert progressivo_invio("N°12-è") == "N12"


class TestEscapeXml:

    def test_all_entities(self):
        assert escape_xml('<a href="x">Tom & Jerry\'s</a>') == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
        )

    def test_ampersand_escaped_once(self):
        """Le entita' introdotte non vengono ri-escapate"""
        assert escape_xml("&<") == "&amp;&lt;"

    def test_plain_text_unchanged(self):
        assert escape_xml("Servizio di consulenza") == "Servizio di consulenza"


class TestFormatDate:

    def test_iso_date_string(self):
        assert format_date("2026-01-15") == "2026-01-15"

    def test_iso_string_with_zulu(self):
        assert format_date("2026-01-15T10:00:00.000Z") == "2026-01-15"

    def test_offset_converted_to_utc(self):
        """Un orario in fuso positivo puo' cadere nel giorno UTC precedente"""
        assert format_date("2026-01-15T00:30:00+02:00") == "2026-01-14"

    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2026, 1, 15, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert format_date(value) == "2026-01-16"

    def test_naive_datetime(self):
        assert format_date(datetime(2026, 1, 15, 23, 59)) == "2026-01-15"

    def test_date_object(self):
        assert format_date(date(2026, 2, 28)) == "2026-02-28"

    def test_none_uses_fallback(self):
        assert format_date(None, fallback=date(2026, 3, 1)) == "2026-03-01"

    def test_none_without_fallback(self):
        assert format_date(None) is None
        assert format_date("  ") is None

    def test_malformed_uses_fallback(self, caplog):
        with caplog.at_level("WARNING"):
            assert format_date("15/01/2026", fallback=date(2026, 3, 1)) == "2026-03-01"
        assert "Data non valida" in caplog.text

    def test_malformed_without_fallback(self):
        assert format_date("ieri") is None
