"""
MRZ (Machine Readable Zone) Parser for TD3 passports.

Every ICAO passport carries two 44-character MRZ lines at the bottom of the data page:
P<UTOSMITH<<JOHN<<<<<<<<<<<<<<<<<<<<<<<<<<<
L898902C36UTO7408122F1204159<<<<<<<<<<<<<06

Fields are decoded by fixed character offsets, never by searching.
"""
import logging
from typing import List, Tuple

from config import DOCUMENT_TYPES
from date_normalizer import parse_mrz_date
from exceptions import NotFoundError, NotFoundReason
from models import PassportFields

logger = logging.getLogger(__name__)


class MRZParser:
    """
    TD3 MRZ locator and decoder
    - Locates the two MRZ lines inside noisy OCR text
    - Decodes names, document number, nationality, dates and sex by offset
    - Leaves unparseable dates empty instead of failing the record
    """

    def __init__(self):
        mrz = DOCUMENT_TYPES["Passport"]["mrz"]
        self.filler = mrz["filler"]
        self.line1_prefix = mrz["line1_prefix"]
        self.min_line_length = mrz["min_line_length"]

    def parse(self, text: str) -> PassportFields:
        """Locate the MRZ in OCR text and decode it into passport fields"""
        mrz_line1, mrz_line2 = self.find_mrz_lines(text)

        surname, given_names = self._parse_names(mrz_line1)

        fields = PassportFields(
            mrz_line1=mrz_line1,
            mrz_line2=mrz_line2,
            country_code=mrz_line1[2:5],
            surname=surname,
            given_names=given_names,
            passport_number=mrz_line2[0:9].replace(self.filler, "").strip(),
            nationality=mrz_line2[10:13],
            date_of_birth=parse_mrz_date(mrz_line2[13:19]),
            sex=mrz_line2[20:21],
            expiry_date=parse_mrz_date(mrz_line2[21:27]),
        )

        if fields.date_of_birth is None:
            logger.debug(f"MRZ date of birth not parseable: {mrz_line2[13:19]!r}")
        if fields.expiry_date is None:
            logger.debug(f"MRZ expiry date not parseable: {mrz_line2[21:27]!r}")

        return fields

    def find_candidates(self, text: str) -> List[str]:
        """Trimmed lines that look like MRZ: contain a filler and are long enough"""
        if not text:
            return []

        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

        candidates = []
        for line in lines:
            line = line.strip()
            if self.filler in line and len(line) >= self.min_line_length:
                candidates.append(line)

        return candidates

    def find_mrz_lines(self, text: str) -> Tuple[str, str]:
        """
        Find MRZ Line 1 and Line 2.

        Line 1 is the first candidate starting with P<. Line 2 is the remaining
        candidate with the most fillers; on a tie the earliest line wins.
        """
        candidates = self.find_candidates(text)
        if not candidates:
            raise NotFoundError(NotFoundReason.NO_MRZ_FOUND)

        mrz_line1 = next((c for c in candidates if c.startswith(self.line1_prefix)), None)
        if mrz_line1 is None:
            raise NotFoundError(NotFoundReason.MRZ_LINE1_NOT_FOUND)

        remaining = [c for c in candidates if c != mrz_line1]
        if not remaining:
            raise NotFoundError(NotFoundReason.MRZ_LINE2_NOT_FOUND)

        # max() keeps the first of equal counts
        mrz_line2 = max(remaining, key=lambda c: c.count(self.filler))

        return mrz_line1, mrz_line2

    def _parse_names(self, line1: str) -> Tuple[str, str]:
        """Split SURNAME<<GIVEN<NAMES into surname and given names"""
        parts = line1[5:].split(self.filler * 2, 1)

        surname = parts[0].replace(self.filler, " ").strip() if parts else ""
        given = parts[1].replace(self.filler, " ").strip() if len(parts) > 1 else ""

        return surname, given
