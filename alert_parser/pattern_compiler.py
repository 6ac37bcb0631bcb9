"""
Regex-as-configuration support.

Bank patterns are stored as JSON-encoded arrays of strings written in
``/pattern/flags`` notation. This module turns those strings into
``PatternSpec`` values, compiles them with the ``regex`` engine (which supports
per-call timeouts) and runs searches that never raise on bad configuration.
"""

from dataclasses import dataclass
from functools import lru_cache
import json
import logging
from typing import Any, List, Optional

import regex

logger = logging.getLogger(__name__)

# JavaScript-style flag letters. g/u/y have no Python counterpart and are ignored.
FLAG_MAP = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
    "g": 0,
    "u": 0,
    "y": 0,
}


class InvalidPatternError(ValueError):
    """Raised when a configured pattern or pattern list cannot be used"""
    pass


@dataclass(frozen=True)
class PatternSpec:
    """A serializable regex rule: the pattern text plus its flag letters"""
    pattern: str
    flags: str = "i"
    source: str = "regex"

    @classmethod
    def from_notation(cls, raw: str) -> "PatternSpec":
        """
        Parse ``/pattern/flags`` notation.

        A string that does not look like slash notation is treated as a bare
        pattern so hand-entered configuration still works.
        """
        text = raw.strip()
        if len(text) >= 2 and text.startswith("/"):
            closing = text.rfind("/")
            flags = text[closing + 1:]
            if closing > 0 and all(ch in FLAG_MAP for ch in flags):
                return cls(pattern=text[1:closing], flags=flags or "i")
        return cls(pattern=text, flags="i")

    def to_notation(self) -> str:
        return f"/{self.pattern}/{self.flags}"

    @property
    def regex_flags(self) -> int:
        value = regex.IGNORECASE
        for ch in self.flags:
            value |= FLAG_MAP.get(ch, 0)
        return value

    def compile(self):
        """Compile the pattern, raising InvalidPatternError on bad syntax"""
        if self.source != "regex":
            raise InvalidPatternError(f"Unsupported pattern source: {self.source}")
        return _compile(self.pattern, self.regex_flags)


@lru_cache(maxsize=1024)
def _compile(pattern: str, flags: int):
    try:
        return regex.compile(pattern, flags)
    except regex.error as e:
        raise InvalidPatternError(f"Invalid regex /{pattern}/: {e}") from e


def decode_pattern_list(raw: Any, label: str = "patterns", strict: bool = False) -> List[str]:
    """
    Decode a stored JSON array of strings.

    Args:
        raw: JSON text, an already-decoded list, or None
        label: Name used in log messages
        strict: Raise InvalidPatternError instead of logging and returning []

    Returns:
        The string entries, in stored order
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (list, tuple)):
        values = list(raw)
    else:
        try:
            values = json.loads(raw)
        except (TypeError, ValueError) as e:
            if strict:
                raise InvalidPatternError(f"{label} is not valid JSON: {e}") from e
            logger.warning(f"Skipping {label}: stored value is not valid JSON ({e})")
            return []
        if not isinstance(values, list):
            if strict:
                raise InvalidPatternError(f"{label} must be a JSON array")
            logger.warning(f"Skipping {label}: stored value is not a JSON array")
            return []

    entries = []
    for value in values:
        if isinstance(value, str):
            entries.append(value)
        elif strict:
            raise InvalidPatternError(f"{label} contains a non-string entry: {value!r}")
        else:
            logger.warning(f"Skipping non-string entry in {label}: {value!r}")
    return entries


def load_patterns(raw: Any, label: str = "patterns") -> List[PatternSpec]:
    """Decode a stored pattern list into PatternSpec values, skipping bad JSON"""
    return [PatternSpec.from_notation(entry) for entry in decode_pattern_list(raw, label) if entry.strip()]


def validate_pattern_list(raw: Any) -> List[str]:
    """
    Check a pattern list before it is stored.

    Returns:
        A list of error messages; empty when every entry compiles
    """
    try:
        entries = decode_pattern_list(raw, label="pattern list", strict=True)
    except InvalidPatternError as e:
        return [str(e)]

    errors = []
    for index, entry in enumerate(entries):
        try:
            PatternSpec.from_notation(entry).compile()
        except InvalidPatternError as e:
            errors.append(f"Pattern {index + 1}: {e}")
    return errors


def safe_search(spec: PatternSpec, text: str, timeout: Optional[float] = None):
    """
    Search text with one configured pattern.

    Bad syntax and timeouts are logged and reported as "no match" so one
    broken rule never aborts a parse.
    """
    try:
        compiled = spec.compile()
    except InvalidPatternError as e:
        logger.warning(f"Skipping pattern {spec.to_notation()}: {e}")
        return None

    try:
        return compiled.search(text, timeout=timeout)
    except TimeoutError:
        logger.warning(f"Pattern {spec.to_notation()} exceeded {timeout}s and was skipped")
        return None


def captured_value(match) -> Optional[str]:
    """Group 1 when the pattern captures, otherwise the whole match"""
    if match is None:
        return None
    if match.re.groups:
        value = match.group(1)
    else:
        value = match.group(0)
    if value is None:
        return None
    value = value.strip()
    return value or None
