"""
Domain records produced by the document classifier and parsers
"""
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class DocumentFamily(str, Enum):
    """Closed set of supported document families"""
    PASSPORT = "Passport"
    EMIRATES_ID = "EmiratesID"
    UAE_TRADE_LICENSE = "UAETradeLicense"


class PassportFields(BaseModel):
    """Fields decoded from a TD3 passport MRZ"""
    passport_number: str = Field("", description="Document number, fillers stripped")
    country_code: str = Field("", description="Issuing state (3 letters)")
    nationality: str = Field("", description="Holder nationality (3 letters)")
    surname: str = ""
    given_names: str = ""
    date_of_birth: Optional[date] = None
    sex: str = ""
    expiry_date: Optional[date] = None
    mrz_line1: str = Field(..., min_length=30, pattern=r"^P<")
    mrz_line2: str = Field(..., min_length=30)


class EmiratesIdFields(BaseModel):
    """Fields extracted from a UAE Emirates ID card"""
    id_number: str = Field(..., pattern=r"^784-\d{4}-\d{7}-\d$")
    full_name: str = ""
    date_of_birth: Optional[date] = None
    nationality: str = ""
    expiry_date: Optional[date] = None


class TradeLicenseFields(BaseModel):
    """Fields extracted from a UAE trade license"""
    company_name: str = ""
    trade_license_number: str = ""
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    license_type: str = ""
    activity: str = ""
    legal_form: str = ""
    address: str = ""
    emirate: str = ""
    owner_name: str = ""
    owner_nationality: str = ""


DocumentFields = Union[PassportFields, EmiratesIdFields, TradeLicenseFields]


class ParseResult(BaseModel):
    """Outcome of running one family's parser over raw text"""
    family: DocumentFamily
    is_valid: bool = False
    fields: Optional[DocumentFields] = None
    raw_text: str = ""
    errors: List[str] = Field(default_factory=list)
