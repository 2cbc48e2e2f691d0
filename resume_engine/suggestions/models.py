# resume_engine/suggestions/models.py
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any
from enum import Enum


class SuggestionType(Enum):
    IMPROVEMENT = "improvement"
    WARNING = "warning"
    TIP = "tip"


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class Suggestion:
    """Feedback on a resume field or on the resume as a whole"""
    type: SuggestionType
    severity: Severity
    message: str                   # Short headline, also the de-duplication key
    suggestion: str                # What to do
    example: Optional[str] = None
    apply_suggestion: Optional[str] = None  # Rewritten text the UI can apply

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'type': self.type.value,
            'severity': self.severity.value,
            'message': self.message,
            'suggestion': self.suggestion,
        }
        if self.example is not None:
            data['example'] = self.example
        if self.apply_suggestion is not None:
            data['applySuggestion'] = self.apply_suggestion
        return data


@dataclass
class AISuggestion:
    """Suggestion derived from failed rule evaluations for one field"""
    field: str
    original: str
    suggestion: str
    reason: str
    keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AIReframe:
    """Template-based rewrite of a piece of text"""
    original: str
    reframed: str
    improvements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
