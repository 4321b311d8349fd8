"""
End-to-end processing of OCR text: optional enhancement, classification,
expected-type check and parsing.
"""
import logging
from typing import Optional, Union

from document_classifier import DocumentClassifier
from document_parser import DocumentParser, resolve_family
from exceptions import DocumentTypeMismatchError
from models import DocumentFamily, ParseResult
from text_enhancer import GPT4AllTextEnhancer

logger = logging.getLogger(__name__)


class DocumentService:
    def __init__(
        self,
        classifier: Optional[DocumentClassifier] = None,
        parser: Optional[DocumentParser] = None,
        enhancer: Optional[GPT4AllTextEnhancer] = None,
    ):
        self.classifier = classifier or DocumentClassifier()
        self.parser = parser or DocumentParser()
        self.enhancer = enhancer

    def process(
        self,
        raw_text: str,
        expected: Optional[Union[DocumentFamily, str]] = None,
        enhance: bool = False,
    ) -> ParseResult:
        """
        Classify and parse OCR text.

        Args:
            raw_text: OCR output for one document
            expected: Family the caller says this is; checked against detection
            enhance: Run the LLM post-processor first (if one is configured)

        Raises:
            ArgumentError: raw_text is empty
            UnsupportedFamilyError: expected is not a known family
            DocumentTypeMismatchError: detected family differs from expected
        """
        expected_family = resolve_family(expected) if expected is not None else None

        text = raw_text
        if enhance and self.enhancer is not None:
            text = self.enhancer.enhance(raw_text, expected_family)

        detected = self.classifier.classify(text)

        if expected_family is not None and detected != expected_family:
            logger.warning(f"Document type mismatch: expected {expected_family.value}, detected {detected.value}")
            raise DocumentTypeMismatchError(expected_family, detected)

        return self.parser.parse(text, detected)
