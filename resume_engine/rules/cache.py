# resume_engine/rules/cache.py
import logging
from typing import Dict, Optional

from resume_engine.rules.models import DomainRules

logger = logging.getLogger(__name__)


class RuleCache:
    """In-memory DomainRules cache keyed by domain identifier"""

    def __init__(self):
        self._entries: Dict[str, DomainRules] = {}

    def get(self, domain: str) -> Optional[DomainRules]:
        return self._entries.get(domain)

    def put(self, domain: str, rules: DomainRules):
        self._entries[domain] = rules

    def clear(self):
        self._entries.clear()
        logger.info("Rule cache cleared")

    def __contains__(self, domain: str) -> bool:
        return domain in self._entries

    def __len__(self) -> int:
        return len(self._entries)
