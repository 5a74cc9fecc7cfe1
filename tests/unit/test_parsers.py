"""Unit tests for message text parsers."""

import pytest
from datetime import datetime, timedelta, timezone

from tradelog_app.data.models import Intent
from tradelog_app.data.parsers import (
    IntentParser,
    PriceParser,
    classify_intent,
    extract_price,
    parse_trade_date,
)
from tradelog_app.errors import NoValidPriceError, UnparseableDateError


class TestPriceParser:
    """Test price token extraction and normalization."""

    def test_plain_number(self):
        assert extract_price("selling widget for 50") == 50.0

    def test_decimal_number(self):
        assert extract_price("widget 12.5 each") == 12.5

    def test_k_suffix_multiplies_by_thousand(self):
        assert extract_price("widget 2k") == 2000.0

    def test_uppercase_k_suffix(self):
        assert PriceParser().parse_token("3K") == 3000.0

    def test_decimal_with_k_suffix(self):
        assert extract_price("wts widget 1.5k obo") == 1500.0

    def test_currency_symbol_stripped(self):
        assert extract_price("wtb widget $75") == 75.0

    def test_thousands_separator_stripped(self):
        assert extract_price("widget for $1,250") == 1250.0

    def test_trailing_sentence_punctuation(self):
        assert extract_price("widget, asking 40.") == 40.0
        assert extract_price("widget for 40, firm") == 40.0

    def test_first_numeric_token_wins(self):
        """A stray number before the price is taken as the price."""
        assert extract_price("2023 widget selling for 50") == 2023.0

    def test_no_number_raises(self):
        with pytest.raises(NoValidPriceError):
            extract_price("selling widget, make an offer")

    def test_unparseable_token_raises(self):
        with pytest.raises(NoValidPriceError) as exc_info:
            extract_price("widget v1.2.3 for sale")
        assert exc_info.value.price_token == "1.2.3"

    def test_custom_multiplier(self):
        parser = PriceParser(thousands_multiplier=500.0)
        assert parser.parse("widget 2k") == 1000.0

    def test_find_token(self):
        parser = PriceParser()
        assert parser.find_token("widget for $1,000 now") == "$1,000"
        assert parser.find_token("no digits here") is None


class TestIntentParser:
    """Test supply/demand keyword classification."""

    @pytest.mark.parametrize("text", [
        "sell widget 50", "selling widget 50", "wts widget 50", "WTS Widget 50",
    ])
    def test_sell_keywords(self, text):
        assert classify_intent(text) is Intent.SUPPLY

    @pytest.mark.parametrize("text", [
        "buy widget 50", "buying widget 50", "wtb widget 50",
    ])
    def test_buy_keywords(self, text):
        assert classify_intent(text) is Intent.DEMAND

    def test_sell_checked_before_buy(self):
        assert classify_intent("wtb gadget or wts widget 50") is Intent.SUPPLY

    def test_word_boundaries(self):
        """Keywords inside longer words do not count."""
        assert classify_intent("seller rating high, buyer beware, widget 50") is Intent.UNKNOWN

    def test_no_keywords_is_unknown(self):
        assert classify_intent("widget going for 50 these days") is Intent.UNKNOWN

    def test_custom_patterns(self):
        parser = IntentParser(sell_pattern=r"\blts\b", buy_pattern=r"\blf\b")
        assert parser.parse("lts widget 5") is Intent.SUPPLY
        assert parser.parse("lf widget 5") is Intent.DEMAND
        assert parser.parse("selling widget 5") is Intent.UNKNOWN


class TestParseTradeDate:
    """Test record timestamp parsing."""

    def test_utc_offset(self):
        result = parse_trade_date("2024-03-01T12:00:00+00:00")
        assert result == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        result = parse_trade_date("2024-03-01T12:00:00Z")
        assert result == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_fractional_seconds_and_offset(self):
        result = parse_trade_date("2024-03-01T14:00:00.123+02:00")
        assert result.utcoffset() == timedelta(hours=2)
        assert result == datetime(2024, 3, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", [
        "", "yesterday", "2024-03-01", "2024-03-01T12:00:00", "01/03/2024 12:00",
    ])
    def test_invalid_dates_raise(self, raw):
        with pytest.raises(UnparseableDateError) as exc_info:
            parse_trade_date(raw)
        assert exc_info.value.raw_date == raw
