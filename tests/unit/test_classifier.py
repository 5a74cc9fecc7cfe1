"""Unit tests for the trade record classifier."""

import pytest
from datetime import datetime, timezone

from tradelog_app.catalog.items import ItemCatalog
from tradelog_app.classifier import TradeClassifier
from tradelog_app.config.defaults import ClassifierParams
from tradelog_app.data.models import Intent, SkipReason


class TestTradeClassifier:
    """Test suite for TradeClassifier."""

    def test_classifies_supply_post(self, widget_catalog, make_record):
        classifier = TradeClassifier(widget_catalog)
        result = classifier.classify(make_record("Selling Widget for 50"))

        assert result.success
        assert result.trade.item == "Widget"
        assert result.trade.price == 50.0
        assert result.trade.intent is Intent.SUPPLY
        assert result.trade.timestamp == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert result.timestamp == result.trade.timestamp
        assert result.skipped_reason is None

    def test_classifies_demand_post(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("wtb Widget $75"))

        assert result.trade.intent is Intent.DEMAND
        assert result.trade.price == 75.0

    def test_unknown_intent_still_classified(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("widget went for 40 today"))

        assert result.success
        assert result.trade.intent is Intent.UNKNOWN

    def test_k_suffix_price(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("Widget 2k"))
        assert result.trade.price == 2000.0

    def test_missing_content(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record(content=None))

        assert not result.success
        assert result.skipped_reason is SkipReason.MISSING_CONTENT
        # Content is checked before the date, so no timestamp is reported
        assert result.timestamp is None

    def test_empty_content_is_missing(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record(content=""))
        assert result.skipped_reason is SkipReason.MISSING_CONTENT

    def test_unparseable_date(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(
            make_record("selling widget 50", date="not a date")
        )

        assert result.skipped_reason is SkipReason.UNPARSEABLE_DATE
        assert result.timestamp is None
        assert "not a date" in result.detail

    @pytest.mark.parametrize("raw_date", [
        "2024-03-01T12:30+00:00",
        "2024-03-01T12+00:00",
        "2024-03-01T12:30:00,5+00:00",
        " 2024-03-01T12:30:00Z",
    ])
    def test_loose_iso_dates_are_unparseable(self, widget_catalog, make_record, raw_date):
        result = TradeClassifier(widget_catalog).classify(
            make_record("wts widget 50", date=raw_date)
        )

        assert result.trade is None
        assert result.skipped_reason is SkipReason.UNPARSEABLE_DATE
        assert result.timestamp is None

    def test_no_item_match_keeps_timestamp(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("selling sprocket for 50"))

        assert result.skipped_reason is SkipReason.NO_ITEM_MATCH
        assert result.trade is None
        assert result.timestamp == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_no_price_keeps_timestamp(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("selling widget, dm offers"))

        assert result.skipped_reason is SkipReason.NO_VALID_PRICE
        assert result.timestamp is not None
        assert "Widget" in result.detail

    def test_first_catalog_item_wins(self, widget_catalog, make_record):
        """Golden Widget is listed before Widget, so it claims the message."""
        result = TradeClassifier(widget_catalog).classify(make_record("wts golden widget 500"))
        assert result.trade.item == "Golden Widget"

    def test_catalog_order_beats_text_order(self, widget_catalog, make_record):
        """Widget comes before Gadget in the catalog even though gadget is mentioned first."""
        result = TradeClassifier(widget_catalog).classify(
            make_record("trading gadget and widget for 30")
        )
        assert result.trade.item == "Widget"

    def test_later_pattern_of_item_matches(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("wts wdg 15"))
        assert result.trade.item == "Widget"

    def test_matching_is_case_insensitive(self, widget_catalog, make_record):
        result = TradeClassifier(widget_catalog).classify(make_record("SELLING WIDGET 10"))
        assert result.trade.item == "Widget"
        assert result.trade.intent is Intent.SUPPLY

    def test_custom_params(self, widget_catalog, make_record):
        params = ClassifierParams(sell_pattern=r"\blts\b", thousands_multiplier=100.0)
        classifier = TradeClassifier(widget_catalog, params)
        result = classifier.classify(make_record("lts widget 3k"))

        assert result.trade.intent is Intent.SUPPLY
        assert result.trade.price == 300.0

    def test_defaults_to_builtin_catalog(self, make_record):
        classifier = TradeClassifier()
        assert len(classifier.catalog) == len(ItemCatalog.builtin())

        result = classifier.classify(make_record("wts dragon egg 1.2k"))
        assert result.trade.item == "Dragon Egg"
        assert result.trade.price == 1200.0

    def test_deterministic(self, widget_catalog, make_record):
        classifier = TradeClassifier(widget_catalog)
        record = make_record("wtb widget 2.5k")
        assert classifier.classify(record) == classifier.classify(record)
