"""
Configuration records consumed by the parser.

Pattern lists and keywords keep their stored encoding (JSON text) so that a
malformed value only disables itself when it is decoded at parse time.
"""

from dataclasses import dataclass
from typing import Any, List, Union

from .pattern_compiler import PatternSpec, decode_pattern_list, load_patterns

PatternField = Union[str, List[str]]

FIELD_NAMES = ("amount", "merchant", "date", "payment_method")


def _is_true(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def _read(record: Any, key: str, default: Any = None) -> Any:
    if isinstance(record, dict):
        return record.get(key, default)
    return getattr(record, key, default)


@dataclass
class BankPattern:
    """Per-institution sender domain and field extraction patterns"""
    bank_name: str
    domain: str
    amount_patterns: PatternField = "[]"
    merchant_patterns: PatternField = "[]"
    date_patterns: PatternField = "[]"
    payment_method_patterns: PatternField = "[]"
    is_active: Union[str, bool] = "true"

    @property
    def active(self) -> bool:
        return _is_true(self.is_active)

    def matches_sender(self, sender: str) -> bool:
        domain = (self.domain or "").strip().lower()
        return bool(domain) and domain in sender.lower()

    def patterns_for(self, field: str) -> List[PatternSpec]:
        """Decode and parse the stored pattern list for one field"""
        if field not in FIELD_NAMES:
            raise ValueError(f"Unknown pattern field: {field}")
        raw = getattr(self, f"{field}_patterns")
        return load_patterns(raw, label=f"{self.bank_name}.{field}_patterns")

    @classmethod
    def from_record(cls, record: Any) -> "BankPattern":
        """Build from an ORM row, a dict or anything with matching attributes"""
        return cls(
            bank_name=_read(record, "bank_name", "") or "",
            domain=_read(record, "domain", "") or "",
            amount_patterns=_read(record, "amount_patterns", "[]"),
            merchant_patterns=_read(record, "merchant_patterns", "[]"),
            date_patterns=_read(record, "date_patterns", "[]"),
            payment_method_patterns=_read(record, "payment_method_patterns", "[]"),
            is_active=_read(record, "is_active", "true"),
        )


@dataclass
class CategoryRule:
    """Named spending bucket with its classification keywords"""
    name: str
    keywords: PatternField = "[]"
    is_active: Union[str, bool] = "true"

    @property
    def active(self) -> bool:
        return _is_true(self.is_active)

    def keyword_list(self) -> List[str]:
        words = decode_pattern_list(self.keywords, label=f"{self.name}.keywords")
        return [w.strip().lower() for w in words if w.strip()]

    @classmethod
    def from_record(cls, record: Any) -> "CategoryRule":
        return cls(
            name=_read(record, "name", "") or "",
            keywords=_read(record, "keywords", "[]"),
            is_active=_read(record, "is_active", "true"),
        )


def active_only(records):
    """Keep active records, preserving their order"""
    return [r for r in records if r.active]
