from typing import List, Union
from pydantic import BaseModel, field_validator

from alert_parser.pattern_compiler import validate_pattern_list

PatternList = Union[str, List[str]]


class BankPatternBase(BaseModel):
    bank_name: str
    domain: str
    amount_patterns: PatternList = "[]"
    merchant_patterns: PatternList = "[]"
    date_patterns: PatternList = "[]"
    payment_method_patterns: PatternList = "[]"
    is_active: str = "true"

    @field_validator("domain")
    @classmethod
    def normalize_domain(cls, v):
        v = v.strip().lower()
        if not v:
            raise ValueError("domain must not be empty")
        return v

    @field_validator("amount_patterns", "merchant_patterns", "date_patterns", "payment_method_patterns")
    @classmethod
    def check_patterns(cls, v):
        errors = validate_pattern_list(v)
        if errors:
            raise ValueError("; ".join(errors))
        return v

    @field_validator("is_active", mode="before")
    @classmethod
    def normalize_is_active(cls, v):
        if isinstance(v, bool):
            return "true" if v else "false"
        return str(v).strip().lower()


class BankPatternCreate(BankPatternBase):
    pass
