"""
Configuration for document families, field extraction cascades and classifier signals
"""
import os

from pydantic import BaseModel, Field

# Separator between a field label and its value: optional colon/dash, any spacing
_SEP = r"\s*[:\-]?\s*"

_SEPARATED_DATE = r"(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})\b"

_DOB_LABEL = r"(?:Date\s*of\s*Birth|Birth\s*Date|\bDOB\b)"
_EXPIRY_LABEL = r"(?:Date\s*of\s*Expi?ry|Expi?ry(?:\s*Date)?)"  # Expry is a common OCR misread

# Labels that often trail a value on the same OCR line
FIELD_LABEL_STOPWORDS = r"\s+(?:Name|Nationality|Date|Sex|Gender|Expiry|Expry|Issue|Card|ID|Number|Signature)\b"

UAE_EMIRATES = [
    "Dubai", "Abu Dhabi", "Sharjah", "Ajman",
    "Umm Al Quwain", "Ras Al Khaimah", "Fujairah",
]

DOCUMENT_TYPES = {
    "Passport": {
        "name": "Passport",
        "fields": [
            "passport_number", "country_code", "nationality", "surname",
            "given_names", "date_of_birth", "sex", "expiry_date",
            "mrz_line1", "mrz_line2",
        ],
        "mrz": {
            "filler": "<",
            "line1_prefix": "P<",
            "min_line_length": 30,  # shorter lines with '<' are OCR noise
        },
    },

    "EmiratesID": {
        "name": "Emirates ID",
        "fields": [
            "id_number", "full_name", "date_of_birth", "nationality", "expiry_date",
        ],
        "field_patterns": {
            "id_number": [
                r"(?<!\d)(784-\d{4}-\d{7}-\d)(?!\d)",
                r"(?<!\d)(784\d{12})(?!\d)",
            ],
            # Name: spaced words, OCR-concatenated words ("NameMuhammadAamar"), then holder labels
            "full_name_spaced": [
                r"\bName" + _SEP + r"(?-i:([A-Z][A-Za-z]+(?:[ \t]+[A-Z][A-Za-z]+)+))",
            ],
            "full_name_concatenated": [
                r"\bName" + _SEP + r"(?-i:([A-Z][a-z]+(?:[A-Z][a-z]+)+))",
            ],
            "full_name_labeled": [
                r"(?:Full\s*Name|Name\s*of\s*Holder)" + _SEP + r"([A-Za-z][A-Za-z \t.'\-]*)",
            ],
            "date_of_birth": [
                _DOB_LABEL + _SEP + _SEPARATED_DATE,
            ],
            "date_of_birth_compact": [
                _DOB_LABEL + _SEP + r"(\d{8})(?!\d)",
            ],
            "date_of_birth_digit_run": [
                _DOB_LABEL + _SEP + r"(\d{9,10})(?!\d)",
            ],
            "nationality": [
                r"\bNationality" + _SEP + r"([A-Za-z][A-Za-z \t]*)",
            ],
            "expiry_date": [
                _EXPIRY_LABEL + _SEP + _SEPARATED_DATE,
            ],
            "expiry_date_compact": [
                _EXPIRY_LABEL + _SEP + r"(\d{8})(?!\d)",
            ],
            "expiry_date_digit_run": [
                _EXPIRY_LABEL + _SEP + r"(\d{9,10})(?!\d)",
            ],
        },
    },

    "UAETradeLicense": {
        "name": "UAE Trade License",
        "fields": [
            "company_name", "trade_license_number", "issue_date", "expiry_date",
            "license_type", "activity", "legal_form", "address", "emirate",
            "owner_name", "owner_nationality",
        ],
        "field_patterns": {
            # ------------------- CORE LICENSE FIELDS -------------------------
            "trade_license_number": [
                r"(?:Trade\s*)?Licen[cs]e\s*(?:Number|No\.?|#)" + _SEP + r"([A-Z0-9][A-Z0-9\-/]*)",
                r"(?:Trade\s*Licen[cs]e|Licen[cs]e|Lic\.)" + _SEP + r"([A-Z0-9\-/]{6,})",
                # Last resort: any letter prefix + digit groups
                r"\b([A-Z]{1,3}[-/]?\d{4,}[-/]?\d{2,})\b",
            ],
            "license_type": [
                r"(?:Licen[cs]e\s*Type|Type\s*of\s*Licen[cs]e)" + _SEP + r"([A-Za-z][A-Za-z \t]*)",
                r"\bType" + _SEP + r"(Commercial|Professional|Industrial|General|Service)\b",
            ],
            "legal_form": [
                r"(?:Legal\s*Form|Legal\s*Type|Form\s*of\s*Business)" + _SEP + r"([A-Za-z][A-Za-z \t.()\-]*)",
                r"\bForm" + _SEP + r"(LLC|L\.L\.C|FZE|FZCO|FZ-LLC|Sole\s*Proprietorship|Partnership)\b",
            ],

            # ------------------- COMPANY DETAILS ----------------------------
            "company_name": [
                r"(?:Company\s*Name|Trad(?:e|ing)\s*Name|Business\s*Name|Name\s*of\s*Company)"
                + _SEP + r"([A-Za-z0-9][A-Za-z0-9 \t&.,'\-]*)",
                r"\bName" + _SEP + r"(?-i:([A-Z][A-Za-z0-9 \t&.,'\-]{3,}))",
            ],
            "activity": [
                r"(?:Business\s*Activit(?:y|ies)|Main\s*Activit(?:y|ies)|Activit(?:y|ies))"
                + _SEP + r"([A-Za-z0-9][A-Za-z0-9 \t&.,'\-]*)",
                r"(?:Activity\s*Code|Activity\s*Description)" + _SEP + r"([A-Za-z0-9][A-Za-z0-9 \t&.,'\-]*)",
            ],

            # ------------------- DATES ----------------------------
            "issue_date": [
                r"(?:Issue\s*Date|Issued\s*On|Date\s*of\s*Issue)" + _SEP + _SEPARATED_DATE,
            ],
            "expiry_date": [
                r"(?:Expiry\s*Date|Expire\s*Date|Expires|Valid\s*Until|Expiration(?:\s*Date)?)"
                + _SEP + _SEPARATED_DATE,
                r"(?:Expiry|Expires)" + _SEP + _SEPARATED_DATE,
                # Any date at all; the parser keeps the first one in the future
                r"\b" + _SEPARATED_DATE,
            ],

            # ------------------- ADDRESS / OWNER ----------------------------
            "address": [
                r"(?:Registered\s*Address|Address)" + _SEP + r"([A-Za-z0-9][A-Za-z0-9 \t,.\-/#]*)",
                r"(?:Business\s*Address|Location)" + _SEP + r"([A-Za-z0-9][A-Za-z0-9 \t,.\-/#]*)",
            ],
            "owner_name": [
                r"(?:Owner|Proprietor|Manager|Partner)" + _SEP
                + r"(?-i:([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+))",
                r"(?:Owner\s*Name|Manager\s*Name|Name\s*of\s*Owner)" + _SEP
                + r"(?-i:([A-Z][A-Za-z]*(?:[ \t]+[A-Z][A-Za-z]*)+))",
            ],
            "owner_nationality": [
                r"(?:Owner\s*Nationality|Nationality\s*of\s*Owner)" + _SEP + r"([A-Za-z][A-Za-z \t]*)",
                r"\bNationality" + _SEP + r"([A-Za-z][A-Za-z \t]*)",
            ],
        },
    },
}


CLASSIFIER_PATTERNS = {
    "trade_license_title": [
        r"\b(?:TRADE|BUSINESS|COMMERCIAL|PROFESSIONAL|INDUSTRIAL)\s*LICEN[CS]E\b",
        r"رخصة\s*تجارية",
        r"الرخصة\s*التجارية",
    ],
    "government_department": [
        r"\bDEPARTMENT\s*OF\s*ECONOMIC\s*DEVELOPMENT\b",
        r"\bDEPARTMENT\s*OF\s*ECONOMY\s*AND\s*TOURISM\b",
        r"\bECONOMIC\s*DEVELOPMENT\s*DEPARTMENT\b",
        r"\bFREE\s*ZONE\s*AUTHORITY\b",
        r"دائرة\s*التنمية\s*الاقتصادية",
    ],
    # Each structural keyword scores once, however often it appears
    "structural_fields": {
        "license_no": r"\bLICEN[CS]E\s*(?:NO\b|NUMBER\b|#)",
        "register_no": r"\bREGISTER\s*(?:NO\b|NUMBER\b)",
        "trade_name": r"\bTRADE\s*NAME\b",
        "legal_form": r"\bLEGAL\s*(?:FORM|TYPE)\b",
        "expire_date": r"\bEXPIR(?:Y|E)\s*DATE\b",
        "issue_date": r"\bISSUE\s*DATE\b",
    },
    "labeled_license_number": r"\bLICEN[CS]E\s*(?:NO\.?|NUMBER|#)\s*[:\-]?\s*[A-Z]{0,3}[-/]?\d{3,}",
    "business_terms": [
        r"\bL\.?L\.?C\b",
        r"\bFZE\b",
        r"\bFZCO\b",
        r"\bACTIVITIES\b",
        r"\bLESSOR\b",
        r"\bPARTNERS?\b",
        r"\bESTABLISHMENT\b",
        r"\bTRADING\b",
        r"\bCOMPANY\b",
    ],
    "emirates_id_number": [
        r"(?<!\d)784-\d{4}-\d{7}-\d(?!\d)",
        r"(?<!\d)784\d{12}(?!\d)",
    ],
    "emirates_id_keywords": [
        r"\bEMIRATES\s*ID\b",
        r"\bEMIRATES\s*IDENTITY\b",
        r"\bUNITED\s*ARAB\s*EMIRATES\s*ID\b",
        r"\bRESIDENT\s*IDENTITY\s*CARD\b",
    ],
    "passport_keywords": [
        r"\bPASSPORT\b",
    ],
    # Owners' passports are often mentioned on licenses
    "trade_license_indicators": [
        r"\bTRADE\s*LICEN[CS]E\b",
        r"\bLICEN[CS]E\s*(?:NO\b|NUMBER\b)",
        r"\b(?:COMMERCIAL|BUSINESS)\s*LICEN[CS]E\b",
        r"\bECONOMIC\s*DEVELOPMENT\b",
    ],
}

TRADE_LICENSE_SCORING = {
    "title": 3,
    "structural_field": 2,
    "labeled_number": 2,
    "business_terms": 1,
    "business_terms_min": 2,
    "threshold": 4,
}


# ------------------- RUNTIME SETTINGS ----------------------------

class EnhancementSettings(BaseModel):
    """Settings for the optional GPT4All OCR post-processor"""
    enabled: bool = False
    base_url: str = "http://localhost:4891"
    model: str = "mini-orca-3b"
    max_tokens: int = Field(2048, gt=0)
    temperature: float = 0.1
    top_p: float = 0.9
    timeout_seconds: float = Field(120, gt=0)
    health_check_timeout_seconds: float = Field(5, gt=0)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_enhancement_settings() -> EnhancementSettings:
    """Read enhancement settings from the environment (.env is loaded by main)."""
    return EnhancementSettings(
        enabled=_env_flag("ENHANCEMENT_ENABLED"),
        base_url=os.getenv("GPT4ALL_BASE_URL", "http://localhost:4891"),
        model=os.getenv("GPT4ALL_MODEL", "mini-orca-3b"),
        max_tokens=int(os.getenv("GPT4ALL_MAX_TOKENS", "2048")),
        temperature=float(os.getenv("GPT4ALL_TEMPERATURE", "0.1")),
        top_p=float(os.getenv("GPT4ALL_TOP_P", "0.9")),
        timeout_seconds=float(os.getenv("GPT4ALL_TIMEOUT_SECONDS", "120")),
        health_check_timeout_seconds=float(os.getenv("GPT4ALL_HEALTH_CHECK_TIMEOUT_SECONDS", "5")),
    )


