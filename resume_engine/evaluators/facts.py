# resume_engine/evaluators/facts.py
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Any

from resume_engine.models import Resume
from resume_engine.ontology import analyze_verb_strength, count_metrics
from resume_engine.text import extract_all_skills, get_resume_text, word_count

PRONOUN_PATTERN = re.compile(r"\b(I |I'm|my |me )", re.IGNORECASE)

# (passed, suggestion override)
CheckResult = Tuple[bool, Optional[str]]


@dataclass
class ResumeFacts:
    """Values the rule checks share, computed once per evaluation pass"""
    skills: List[str] = field(default_factory=list)
    text: str = ""
    text_lower: str = ""
    email: str = ""
    metrics_count: int = 0
    verbs: Dict[str, float] = field(default_factory=dict)
    summary_words: int = 0

    @classmethod
    def collect(cls, resume: Resume) -> 'ResumeFacts':
        text = get_resume_text(resume)
        return cls(
            skills=extract_all_skills(resume),
            text=text,
            text_lower=text.lower(),
            email=(resume.personal_info.email or '').lower(),
            metrics_count=count_metrics(text),
            verbs=analyze_verb_strength(text),
            summary_words=word_count(resume.personal_info.summary),
        )

    @property
    def pronoun_count(self) -> int:
        return len(PRONOUN_PATTERN.findall(self.text))

    @property
    def mentioned_skills(self) -> List[str]:
        """Declared skills that also appear in the narrative text"""
        return [s for s in self.skills if s.lower() in self.text_lower]

    def skills_demonstrated(self) -> bool:
        return len(self.mentioned_skills) >= len(self.skills) * 0.3


def resolve_check(
    rule_id: str,
    checks: Dict[str, Callable[..., Any]],
    prefix_checks: Sequence[Tuple[str, Callable[..., Any]]]
) -> Optional[Callable[..., Any]]:
    """
    Find the check for a rule id

    Exact ids win over id-family prefixes; None means the rule is advisory and passes.
    """
    if rule_id in checks:
        return checks[rule_id]
    for prefix, check in prefix_checks:
        if rule_id.startswith(prefix):
            return check
    return None
