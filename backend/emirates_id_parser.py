"""
Emirates ID field extraction from OCR text
"""
import logging
import re
from datetime import date
from typing import Optional

from config import DOCUMENT_TYPES, FIELD_LABEL_STOPWORDS
from date_normalizer import decode_digit_run, parse_compact_date, parse_date
from exceptions import NotFoundError, NotFoundReason
from models import EmiratesIdFields
from pattern_cascade import length_between, try_patterns

logger = logging.getLogger(__name__)


def format_id_number(digits: str) -> str:
    """784XXXXXXXXXXXX -> 784-XXXX-XXXXXXX-X"""
    return f"{digits[:3]}-{digits[3:7]}-{digits[7:14]}-{digits[14]}"


def respace_name(name: str) -> str:
    """Put back spaces OCR dropped between capitalized words: MuhammadAamar -> Muhammad Aamar"""
    return re.sub(r"(?<=[a-z])(?=[A-Z])", " ", name)


def clean_name(value: str) -> str:
    """Drop trailing field labels, keep letters only, collapse whitespace"""
    value = re.split(FIELD_LABEL_STOPWORDS, value, maxsplit=1, flags=re.IGNORECASE)[0]
    value = re.sub(r"[^A-Za-z\s]", "", value)
    return re.sub(r"\s+", " ", value).strip()


class EmiratesIdParser:
    """Extract Emirates ID fields using ordered regex cascades"""

    def __init__(self):
        self.patterns = DOCUMENT_TYPES["EmiratesID"]["field_patterns"]

    def parse(self, text: str) -> EmiratesIdFields:
        id_number = self.extract_id_number(text)
        if id_number is None:
            raise NotFoundError(NotFoundReason.EMIRATES_ID_NUMBER_NOT_DETECTED)

        fields = EmiratesIdFields(
            id_number=id_number,
            full_name=self.extract_name(text) or "",
            date_of_birth=self._extract_date(text, "date_of_birth"),
            nationality=self.extract_nationality(text) or "",
            expiry_date=self._extract_date(text, "expiry_date"),
        )

        missing = [name for name, value in fields.model_dump().items() if not value]
        if missing:
            logger.debug(f"Emirates ID fields not found: {missing}")

        return fields

    def extract_id_number(self, text: str) -> Optional[str]:
        hyphenated, compact = self.patterns["id_number"]

        id_number = try_patterns([hyphenated], text)
        if id_number:
            return id_number

        digits = try_patterns([compact], text)
        if digits:
            return format_id_number(digits)

        return None

    def extract_name(self, text: str) -> Optional[str]:
        in_range = length_between(3, 100)

        name = try_patterns(self.patterns["full_name_spaced"], text, in_range)
        if name is None:
            name = try_patterns(self.patterns["full_name_concatenated"], text, in_range)
        if name is None:
            name = try_patterns(self.patterns["full_name_labeled"], text, in_range)
        if name is None:
            return None

        return clean_name(respace_name(name)) or None

    def extract_nationality(self, text: str) -> Optional[str]:
        value = try_patterns(self.patterns["nationality"], text, length_between(3, 60))
        if value is None:
            return None
        return clean_name(value) or None

    def _extract_date(self, text: str, field: str) -> Optional[date]:
        """
        Labelled date in one of three shapes, tried in order:
        separated (12/05/1990), compact (12051990) and a 9-10 digit run with a stray digit.
        """
        value = try_patterns(self.patterns[field], text, lambda v: parse_date(v) is not None)
        if value:
            return parse_date(value)

        value = try_patterns(self.patterns[f"{field}_compact"], text,
                             lambda v: parse_compact_date(v) is not None)
        if value:
            return parse_compact_date(value)

        value = try_patterns(self.patterns[f"{field}_digit_run"], text,
                             lambda v: decode_digit_run(v) is not None)
        if value:
            return decode_digit_run(value)

        return None
