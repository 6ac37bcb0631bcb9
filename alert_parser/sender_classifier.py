"""
Recognition of bank / payment-service senders.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from .defaults import FALLBACK_BANK_DOMAINS
from .models import BankPattern, active_only


def is_bank_sender(sender: Optional[str], bank_patterns: Iterable[BankPattern]) -> bool:
    """
    Decide whether a sender address belongs to a recognised bank.

    Active bank pattern domains are used when there are any; otherwise the
    built-in domain list applies.
    """
    if not sender or not isinstance(sender, str):
        return False

    active = active_only(bank_patterns)
    if active:
        return any(pattern.matches_sender(sender) for pattern in active)

    sender_lower = sender.lower()
    return any(domain in sender_lower for domain in FALLBACK_BANK_DOMAINS)


def matching_patterns(sender: Optional[str], bank_patterns: Iterable[BankPattern]) -> List[BankPattern]:
    """Active bank patterns whose domain occurs in the sender, in stored order"""
    if not sender:
        return []
    return [pattern for pattern in active_only(bank_patterns) if pattern.matches_sender(sender)]


def build_sender_query(bank_patterns: Iterable[BankPattern], after: Optional[datetime] = None) -> str:
    """
    Build a mailbox search query for bank senders.

    Example:
        "from:hdfcbank OR from:icicibank after:1704067200"
    """
    domains = [p.domain.strip() for p in active_only(bank_patterns) if p.domain and p.domain.strip()]
    if not domains:
        domains = list(FALLBACK_BANK_DOMAINS)

    query = " OR ".join(f"from:{domain}" for domain in dict.fromkeys(domains))
    if after is not None:
        query = f"{query} after:{int(after.timestamp())}"
    return query
