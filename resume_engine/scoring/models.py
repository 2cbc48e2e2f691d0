# resume_engine/scoring/models.py
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any
from enum import Enum

from resume_engine.evaluators.models import RuleEvaluation


@dataclass
class CategoryScore:
    """One line of the ATS score breakdown"""
    category: str
    score: int                     # 0-100
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ATSScore:
    """Weighted five-category ATS score"""
    overall_score: int             # 0-100
    keyword_match: int
    format_compliance: int
    metrics_present: int
    power_words: int
    skill_relevance: int
    breakdown: List[CategoryScore] = field(default_factory=list)

    @classmethod
    def zero(cls) -> 'ATSScore':
        """Result returned when scoring fails"""
        return cls(
            overall_score=0,
            keyword_match=0,
            format_compliance=0,
            metrics_present=0,
            power_words=0,
            skill_relevance=0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'overallScore': self.overall_score,
            'keywordMatch': self.keyword_match,
            'formatCompliance': self.format_compliance,
            'metricsPresent': self.metrics_present,
            'powerWords': self.power_words,
            'skillRelevance': self.skill_relevance,
            'breakdown': [b.to_dict() for b in self.breakdown],
        }


class Verdict(Enum):
    PASS = "pass"
    BORDERLINE = "borderline"
    FAIL = "fail"


@dataclass
class VerdictResult:
    """ATS / HR / JD composite score with red flag penalty"""
    ats: int
    hr: int
    jd: int
    red_flag_penalty: float        # Positive amount subtracted (before capping)
    final: int                     # 0-100
    verdict: Verdict
    evaluations: List[RuleEvaluation] = field(default_factory=list)
    top_fixes: List[str] = field(default_factory=list)

    @classmethod
    def zero(cls) -> 'VerdictResult':
        return cls(ats=0, hr=0, jd=0, red_flag_penalty=0, final=0, verdict=Verdict.FAIL)

    @property
    def failed(self) -> List[RuleEvaluation]:
        return [e for e in self.evaluations if not e.passed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ats': self.ats,
            'hr': self.hr,
            'jd': self.jd,
            'redFlagPenalty': self.red_flag_penalty,
            'final': self.final,
            'verdict': self.verdict.value,
            'evaluations': [e.to_dict() for e in self.evaluations],
            'topFixes': list(self.top_fixes),
        }


@dataclass
class ScoreFeedback:
    """Human readable band for an overall score"""
    level: str                     # excellent, good, fair, needs_improvement
    message: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
