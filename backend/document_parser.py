"""
Parser boundary: routes raw text to the family parser and turns extraction
failures into an invalid ParseResult instead of an exception.
"""
import logging
from datetime import datetime
from typing import Callable, Optional, Union

from emirates_id_parser import EmiratesIdParser
from exceptions import DocumentProcessingError, UnsupportedFamilyError
from models import DocumentFamily, ParseResult
from mrz_parser import MRZParser
from trade_license_parser import TradeLicenseParser

logger = logging.getLogger(__name__)


def resolve_family(family: Union[DocumentFamily, str]) -> DocumentFamily:
    """Accept a DocumentFamily or its string value"""
    if isinstance(family, DocumentFamily):
        return family
    try:
        return DocumentFamily(family)
    except ValueError:
        raise UnsupportedFamilyError(family) from None


class DocumentParser:
    """One parser per document family; every family must be registered here"""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.parsers = {
            DocumentFamily.PASSPORT: MRZParser(),
            DocumentFamily.EMIRATES_ID: EmiratesIdParser(),
            DocumentFamily.UAE_TRADE_LICENSE: TradeLicenseParser(clock=clock),
        }

    def parse(self, raw_text: str, family: Union[DocumentFamily, str]) -> ParseResult:
        """
        Extract structured fields for the given family.

        Raises:
            UnsupportedFamilyError: family is not one of the supported values

        Document quality problems never raise; they come back as
        ParseResult(is_valid=False, errors=[...]).
        """
        family = resolve_family(family)
        raw_text = raw_text or ""
        result = ParseResult(family=family, raw_text=raw_text)

        try:
            result.fields = self.parsers[family].parse(raw_text)
            result.is_valid = True
        except DocumentProcessingError as e:
            logger.warning(f"{family.value} extraction failed: {e}")
            result.errors.append(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error while parsing {family.value}")
            result.errors.append(str(e) or e.__class__.__name__)

        if not result.is_valid:
            result.fields = None

        return result
