"""
Optional OCR post-processing through a local GPT4All server (OpenAI-compatible API).
Any failure falls back to the original OCR text.
"""
import logging
from typing import Optional

import requests

from config import EnhancementSettings, get_enhancement_settings
from models import DocumentFamily

logger = logging.getLogger(__name__)

DOCUMENT_LABELS = {
    DocumentFamily.PASSPORT: "passport",
    DocumentFamily.EMIRATES_ID: "Emirates ID",
    DocumentFamily.UAE_TRADE_LICENSE: "UAE trade license",
}

PROMPT_TEMPLATE = """You are an OCR post-processor for {document} documents.

RULES:
- Do NOT add new information
- Do NOT infer missing values
- Fix OCR errors only
- Preserve numbers, dates, and IDs
- Preserve MRZ lines EXACTLY
- Return plain text only (no markdown)

OCR TEXT:
{text}"""


def build_prompt(text: str, family: Optional[DocumentFamily]) -> str:
    return PROMPT_TEMPLATE.format(document=DOCUMENT_LABELS.get(family, "document"), text=text)


class GPT4AllTextEnhancer:
    """Rewrites noisy OCR text with a local LLM before classification"""

    def __init__(self, settings: Optional[EnhancementSettings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_enhancement_settings()
        self.session = session or requests.Session()
        self.base_url = self.settings.base_url.rstrip("/")

    def enhance(self, raw_text: str, family: Optional[DocumentFamily] = None) -> str:
        if not raw_text or not raw_text.strip():
            return raw_text
        if not self.settings.enabled:
            return raw_text

        try:
            enhanced = self._chat_completion(build_prompt(raw_text, family))
        except (requests.exceptions.RequestException, ValueError, AttributeError, TypeError) as e:
            logger.error(f"GPT4All enhancement failed. Returning original OCR text. ({e})")
            return raw_text

        if not enhanced:
            logger.warning("GPT4All returned an empty answer. Returning original OCR text.")
            return raw_text

        return enhanced

    def _chat_completion(self, prompt: str) -> str:
        payload = {
            "model": self.settings.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
            "top_p": self.settings.top_p,
            "stream": False,
        }

        response = self.session.post(
            f"{self.base_url}/v1/chat/completions",
            json=payload,
            timeout=self.settings.timeout_seconds,
        )
        response.raise_for_status()

        choices = response.json().get("choices") or []
        if not choices:
            return ""
        content = (choices[0].get("message") or {}).get("content") or ""
        return content.strip()

    def is_server_available(self) -> bool:
        try:
            response = self.session.get(
                f"{self.base_url}/v1/models",
                timeout=self.settings.health_check_timeout_seconds,
            )
        except requests.exceptions.RequestException:
            return False
        return response.ok
