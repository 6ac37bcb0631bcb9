"""
Runtime options for the alert parser.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParserOptions:
    """Tunables injected into the parser instead of read from global settings"""
    max_text_length: int = 20000
    regex_timeout: Optional[float] = 0.25
    day_first: bool = True
    unknown_merchant_placeholder: Optional[str] = None

    @classmethod
    def from_settings(cls, settings) -> "ParserOptions":
        """Build options from the service Settings object"""
        return cls(
            max_text_length=settings.PARSER_MAX_TEXT_LENGTH,
            regex_timeout=settings.PARSER_REGEX_TIMEOUT_SECONDS,
            day_first=settings.PARSER_DAY_FIRST,
            unknown_merchant_placeholder=settings.PARSER_UNKNOWN_MERCHANT_PLACEHOLDER,
        )
