"""PII masking utilities."""

import re
import hashlib
from typing import Optional

from presidio_analyzer import AnalyzerEngine, RecognizerResult
from presidio_anonymizer import AnonymizerEngine
from presidio_anonymizer.entities import OperatorConfig


# Initialize Presidio engines (lazy loading)
_analyzer: Optional[AnalyzerEngine] = None
_anonymizer: Optional[AnonymizerEngine] = None


def _get_analyzer() -> AnalyzerEngine:
    """Get or create the Presidio analyzer engine."""
    global _analyzer
    if _analyzer is None:
        _analyzer = AnalyzerEngine()
    return _analyzer


def _get_anonymizer() -> AnonymizerEngine:
    """Get or create the Presidio anonymizer engine."""
    global _anonymizer
    if _anonymizer is None:
        _anonymizer = AnonymizerEngine()
    return _anonymizer


# Entities a bank or card authority may echo back in an error message
FINANCIAL_ENTITIES = [
    "CREDIT_CARD",
    "IBAN_CODE",
    "US_BANK_NUMBER",
    "EMAIL_ADDRESS",
    "PHONE_NUMBER",
    "IP_ADDRESS",
    "PERSON",
]

_OPERATORS = {
    "CREDIT_CARD": OperatorConfig("replace", {"new_value": "[REDACTED_CARD]"}),
    "IBAN_CODE": OperatorConfig("replace", {"new_value": "[REDACTED_IBAN]"}),
    "US_BANK_NUMBER": OperatorConfig("replace", {"new_value": "[REDACTED_NUMBER]"}),
    "EMAIL_ADDRESS": OperatorConfig("replace", {"new_value": "[REDACTED_EMAIL]"}),
    "PHONE_NUMBER": OperatorConfig("replace", {"new_value": "[REDACTED_PHONE]"}),
    "IP_ADDRESS": OperatorConfig("replace", {"new_value": "[REDACTED_IP]"}),
    "PERSON": OperatorConfig("replace", {"new_value": "[REDACTED_PERSON]"}),
    "DEFAULT": OperatorConfig("replace", {"new_value": "[REDACTED]"}),
}

# Card numbers (13-19 digits, optionally grouped by spaces or dashes)
_CARD_PATTERN = re.compile(r'\b(?:\d[-\s]?){12,18}\d\b')

# Remaining long digit runs: account numbers, authorization codes
_DIGIT_RUN_PATTERN = re.compile(r'\b\d{6,}\b')

SENSITIVE_FIELDS = {
    "card_number", "pin", "token", "authorization_code",
    "password", "api_key", "secret",
}


def mask_card_number(card_number: str) -> str:
    """Mask a card number, showing only last 4 digits."""
    if not card_number:
        return ""
    digits = re.sub(r'[-\s]', '', card_number)
    # If already just last 4, return as-is with asterisks
    if len(digits) <= 4:
        return f"****{digits}"
    # Otherwise mask all but last 4
    return f"****{digits[-4:]}"


def hash_card_number(card_number: str) -> str:
    """Hash a card number for audit correlation."""
    return hashlib.sha256(card_number.encode()).hexdigest()[:12]


def _mask_pii_regex(text: str) -> str:
    """Redact card numbers and long digit runs."""
    text = _CARD_PATTERN.sub('[REDACTED_CARD]', text)
    text = _DIGIT_RUN_PATTERN.sub('[REDACTED_NUMBER]', text)
    return text


def _mask_pii_presidio(text: str) -> str:
    """Apply Microsoft Presidio-based PII detection and anonymization."""
    results: list[RecognizerResult] = _get_analyzer().analyze(
        text=text,
        entities=FINANCIAL_ENTITIES,
        language="en",
    )

    if not results:
        return text

    anonymized = _get_anonymizer().anonymize(
        text=text,
        analyzer_results=results,
        operators=_OPERATORS,
    )
    return anonymized.text


def mask_pii(text: str, use_presidio: bool = True) -> str:
    """Mask PII in free text, e.g. a collaborator's exception message.

    Regex masking runs first; Presidio then catches what the patterns
    miss (names, e-mail addresses, IBANs).

    Args:
        text: The text to redact PII from.
        use_presidio: Whether to apply Presidio detection after regex.

    Returns:
        Text with PII redacted.
    """
    if not text:
        return text

    masked_text = _mask_pii_regex(text)
    if use_presidio:
        masked_text = _mask_pii_presidio(masked_text)

    return masked_text


def redact_for_logging(data: dict) -> dict:
    """Redact sensitive fields from a dictionary for logging."""
    redacted = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            if key.lower() == "card_number" and value:
                redacted[key] = mask_card_number(str(value))
            else:
                redacted[key] = "[REDACTED]"
        elif isinstance(value, dict):
            redacted[key] = redact_for_logging(value)
        elif isinstance(value, list):
            redacted[key] = [
                redact_for_logging(v) if isinstance(v, dict) else v
                for v in value
            ]
        else:
            redacted[key] = value

    return redacted
