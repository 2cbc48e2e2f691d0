# resume_engine/evaluators/models.py
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class RuleEvaluation:
    """Outcome of one rule against a resume"""
    rule_id: str
    passed: bool                    # For red flags: True means no flag raised
    description: str
    suggestion: Optional[str] = None  # Only set when the rule failed
    weight: float = 0.0             # Red flags carry their (negative) penalty
    category: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
