"""
UAE trade license field extraction from OCR text
"""
import logging
import re
from datetime import date, datetime
from typing import Callable, Optional

from config import DOCUMENT_TYPES, UAE_EMIRATES
from date_normalizer import parse_date
from exceptions import NotFoundError, NotFoundReason
from models import TradeLicenseFields
from pattern_cascade import all_of, contains_digit, excludes, length_between, try_patterns

logger = logging.getLogger(__name__)


class TradeLicenseParser:
    """
    Extract UAE trade license fields. Each field has its own cascade and
    plausibility filter; only the final identifier check can fail the record.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.patterns = DOCUMENT_TYPES["UAETradeLicense"]["field_patterns"]
        self.clock = clock or datetime.now

    def parse(self, text: str) -> TradeLicenseFields:
        text_clean = text.replace("\r\n", "\n").replace("\r", "\n")
        p = self.patterns

        fields = TradeLicenseFields(
            trade_license_number=try_patterns(p["trade_license_number"], text_clean, contains_digit) or "",
            company_name=try_patterns(
                p["company_name"], text_clean,
                all_of(excludes("License", "Number"), length_between(4, 200)),
            ) or "",
            issue_date=self._first_date(p["issue_date"], text_clean),
            expiry_date=self.extract_expiry_date(text_clean),
            license_type=try_patterns(p["license_type"], text_clean) or "",
            activity=try_patterns(p["activity"], text_clean, length_between(6, 200)) or "",
            legal_form=try_patterns(p["legal_form"], text_clean) or "",
            address=try_patterns(p["address"], text_clean, length_between(11, 300)) or "",
            emirate=self.extract_emirate(text_clean),
            owner_name=try_patterns(p["owner_name"], text_clean, length_between(4, 100)) or "",
            owner_nationality=try_patterns(p["owner_nationality"], text_clean) or "",
        )

        if not fields.trade_license_number and not fields.company_name:
            raise NotFoundError(NotFoundReason.TRADE_LICENSE_IDENTIFIERS_NOT_DETECTED)

        missing = [name for name, value in fields.model_dump().items() if not value]
        if missing:
            logger.debug(f"Trade license fields not found: {missing}")

        return fields

    def extract_expiry_date(self, text: str) -> Optional[date]:
        """
        First date, across every match of every expiry pattern, that lies
        strictly after today. Issue dates and other past dates are skipped.
        """
        today = self.clock().date()

        def in_future(value: str) -> bool:
            parsed = parse_date(value)
            return parsed is not None and parsed > today

        value = try_patterns(self.patterns["expiry_date"], text, in_future, all_matches=True)
        return parse_date(value) if value else None

    @staticmethod
    def extract_emirate(text: str) -> str:
        for emirate in UAE_EMIRATES:
            if re.search(rf"\b{re.escape(emirate)}\b", text, re.IGNORECASE):
                return emirate
        return ""

    @staticmethod
    def _first_date(patterns, text: str) -> Optional[date]:
        value = try_patterns(patterns, text, lambda v: parse_date(v) is not None)
        return parse_date(value) if value else None
