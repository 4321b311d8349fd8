"""
Document Type Classifier
Detects the document family of OCR text using a priority chain of strong signals
and a weighted score for trade licenses.
"""

import logging
import re
from typing import NamedTuple

from config import CLASSIFIER_PATTERNS, TRADE_LICENSE_SCORING
from exceptions import ArgumentError
from models import DocumentFamily
from mrz_parser import MRZParser

logger = logging.getLogger(__name__)


class Classification(NamedTuple):
    family: DocumentFamily
    reason: str
    trade_license_score: int


def _any_match(patterns, text: str) -> bool:
    return any(re.search(pattern, text, re.IGNORECASE) for pattern in patterns)


class DocumentClassifier:
    """
    Classify documents into Passport, Emirates ID or UAE trade license.

    Trade licenses are checked first: they routinely quote the owner's passport
    or Emirates ID, which would otherwise win.
    """

    def __init__(self):
        self.patterns = CLASSIFIER_PATTERNS
        self.scoring = TRADE_LICENSE_SCORING
        self.mrz_parser = MRZParser()

    def classify(self, text: str) -> DocumentFamily:
        """
        Classify document based on extracted text.

        Raises:
            ArgumentError: text is empty or whitespace only
        """
        return self.explain(text).family

    def explain(self, text: str) -> Classification:
        """Classify and report which rule decided it"""
        if text is None or not text.strip():
            raise ArgumentError("Raw text cannot be empty")

        text = text.replace("\r\n", "\n").replace("\r", "\n")

        score = self.trade_license_score(text)
        logger.debug(f"Trade license score: {score}")

        if score >= self.scoring["threshold"]:
            result = Classification(
                DocumentFamily.UAE_TRADE_LICENSE,
                f"Trade license score {score} >= {self.scoring['threshold']}",
                score,
            )
        elif self._is_emirates_id(text):
            result = Classification(DocumentFamily.EMIRATES_ID, "Emirates ID number or keyword found", score)
        elif self._has_passport_mrz(text):
            result = Classification(DocumentFamily.PASSPORT, "Passport MRZ line found", score)
        elif self._has_passport_keyword(text):
            result = Classification(DocumentFamily.PASSPORT, "Passport keyword found", score)
        else:
            # Passport is the fallback family
            result = Classification(DocumentFamily.PASSPORT, "No strong signal; defaulting to passport", score)

        logger.info(f"Classified as {result.family.value}: {result.reason}")
        return result

    def trade_license_score(self, text: str) -> int:
        """
        Weighted evidence that text is a trade license:
        +3 title or issuing department, +2 per distinct structural label,
        +2 labelled license number with digits, +1 for two or more business terms
        """
        p = self.patterns
        score = 0

        if _any_match(p["trade_license_title"], text) or _any_match(p["government_department"], text):
            score += self.scoring["title"]

        for pattern in p["structural_fields"].values():
            if re.search(pattern, text, re.IGNORECASE):
                score += self.scoring["structural_field"]

        if re.search(p["labeled_license_number"], text, re.IGNORECASE):
            score += self.scoring["labeled_number"]

        business_terms = sum(1 for pattern in p["business_terms"] if re.search(pattern, text, re.IGNORECASE))
        if business_terms >= self.scoring["business_terms_min"]:
            score += self.scoring["business_terms"]

        return score

    def _is_emirates_id(self, text: str) -> bool:
        return (_any_match(self.patterns["emirates_id_number"], text)
                or _any_match(self.patterns["emirates_id_keywords"], text))

    def _has_passport_mrz(self, text: str) -> bool:
        prefix = self.mrz_parser.line1_prefix
        return any(line.startswith(prefix) for line in self.mrz_parser.find_candidates(text))

    def _has_passport_keyword(self, text: str) -> bool:
        return (_any_match(self.patterns["passport_keywords"], text)
                and not _any_match(self.patterns["trade_license_indicators"], text))
