"""
Trade record classifier.

Turns one raw trade record into a classified trade (item, price, intent,
timestamp) or a skip reason. The steps run in a fixed order and each one can
drop the record:

    content present -> date parses -> item matches -> price found -> intent

A parsed timestamp is reported back even when a later step drops the record,
because the overall data span covers every dated message, not just the ones
that named an item and a price.
"""

from datetime import datetime
from typing import Optional

from .catalog.items import ItemCatalog
from .config.defaults import ClassifierParams
from .data.models import ClassificationResult, ClassifiedTrade, SkipReason, TradeRecord
from .data.parsers import IntentParser, PriceParser, parse_trade_date
from .errors import (
    MissingContentError,
    NoItemMatchError,
    NoValidPriceError,
    UnparseableDateError,
)
from .logging.config import get_logger, log_skip_decision

logger = get_logger(__name__)


class TradeClassifier:
    """Classifies trade records against an item catalog."""

    def __init__(self, catalog: Optional[ItemCatalog] = None,
                 params: Optional[ClassifierParams] = None) -> None:
        self.catalog = catalog if catalog is not None else ItemCatalog.builtin()
        self.params = params or ClassifierParams()

        self.price_parser = PriceParser(self.params.price_pattern,
                                        self.params.thousands_multiplier)
        self.intent_parser = IntentParser(self.params.sell_pattern,
                                          self.params.buy_pattern)

    def classify(self, record: TradeRecord, line_number: int = 0) -> ClassificationResult:
        """
        Classify a single record.

        Args:
            record: Raw trade record
            line_number: CSV line of the record, used for diagnostics only

        Returns:
            ClassificationResult with either a trade or a skip reason
        """
        try:
            content = self._require_content(record)
        except MissingContentError as e:
            return self._skip(record, line_number, SkipReason.MISSING_CONTENT, str(e))

        try:
            timestamp = parse_trade_date(record.date)
        except UnparseableDateError as e:
            return self._skip(record, line_number, SkipReason.UNPARSEABLE_DATE, str(e))

        try:
            item = self._match_item(content)
        except NoItemMatchError as e:
            return self._skip(record, line_number, SkipReason.NO_ITEM_MATCH, str(e),
                              timestamp=timestamp)

        try:
            price = self.price_parser.parse(content)
        except NoValidPriceError as e:
            return self._skip(record, line_number, SkipReason.NO_VALID_PRICE,
                              f"No valid price found for item '{item}': {e}",
                              timestamp=timestamp)

        trade = ClassifiedTrade(
            item=item,
            price=price,
            intent=self.intent_parser.parse(content),
            timestamp=timestamp,
        )
        return ClassificationResult.classified(trade)

    @staticmethod
    def _require_content(record: TradeRecord) -> str:
        """Lowercased message text of the record."""
        if not record.content:
            raise MissingContentError("Missing content")
        return record.content.lower()

    def _match_item(self, content: str) -> str:
        item = self.catalog.match(content)
        if item is None:
            raise NoItemMatchError("No identifiable item found in content")
        return item

    def _skip(self, record: TradeRecord, line_number: int, reason: SkipReason,
              detail: str, timestamp: Optional[datetime] = None) -> ClassificationResult:
        log_skip_decision(logger, line_number, record.author, reason.value, detail)
        return ClassificationResult.skipped(reason, detail, timestamp=timestamp)
