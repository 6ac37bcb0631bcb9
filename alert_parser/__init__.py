from .email_parser import EmailParser, ParsedTransaction, PatternSource
from .models import BankPattern, CategoryRule
from .options import ParserOptions
from .pattern_compiler import InvalidPatternError, PatternSpec, validate_pattern_list

__all__ = [
    "EmailParser",
    "ParsedTransaction",
    "PatternSource",
    "BankPattern",
    "CategoryRule",
    "ParserOptions",
    "InvalidPatternError",
    "PatternSpec",
    "validate_pattern_list",
]
