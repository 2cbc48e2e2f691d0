import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.config import BUNDLED_RULES_DIR  # noqa: E402
from resume_engine.models import (  # noqa: E402
    Education, Experience, PersonalInfo, Project, Resume, SkillGroup
)
from resume_engine.rules.models import (  # noqa: E402
    DomainRules, ExperienceLevelRules, PowerWord, PowerWordCategory, ScoringWeights,
    SkillCategory, SkillRule
)

SUMMARY = (
    "Full-stack developer with 5+ years of experience building React and Node.js "
    "applications for e-commerce clients, focused on performance, accessibility "
    "and clean, well tested code."
)


def make_personal_info(**overrides) -> PersonalInfo:
    data = dict(
        full_name="Jane Doe",
        email="jane.doe@example.com",
        phone="+1 555 010 2000",
        location="Austin, TX",
        linkedin="linkedin.com/in/janedoe",
        github="github.com/janedoe",
        summary=SUMMARY,
    )
    data.update(overrides)
    return PersonalInfo(**data)


def make_experience(description: str = None, **overrides) -> Experience:
    data = dict(
        company="Acme Corp",
        position="Software Engineer",
        description=description if description is not None else (
            "Architected a React, TypeScript and Node.js storefront on PostgreSQL serving 5000 users, "
            "reduced page load time by 40% and collaborated with a team of 6 engineers"
        ),
        start_date="2020-01",
        current=True,
    )
    data.update(overrides)
    return Experience(**data)


def make_resume(**overrides) -> Resume:
    """A complete, reasonably strong resume; keyword arguments replace whole sections"""
    data = dict(
        personal_info=make_personal_info(),
        experiences=[make_experience()],
        education=[Education(institution="State University", degree="BSc",
                             field_of_study="Computer Science")],
        skills=[
            SkillGroup(category="Frontend", skills=["React", "JavaScript", "TypeScript"]),
            SkillGroup(category="Backend", skills=["Node.js", "Express", "PostgreSQL"]),
        ],
        projects=[Project(
            name="Shop",
            description="Built an e-commerce platform with React, used by 10000 users",
            technologies=["React", "Node.js", "MongoDB"],
        )],
    )
    data.update(overrides)
    return Resume(**data)


def skills_resume(count: int) -> Resume:
    """Resume declaring `count` distinct skills in one comma-separated entry"""
    names = ", ".join(f"Skill{i}" for i in range(count))
    return make_resume(skills=[SkillGroup(category="All", skills=[names])], projects=[])


def make_domain_rules(required=(), nice_to_have=(), verbs=(), weights=None) -> DomainRules:
    """Small DomainRules with a single midLevel"""
    level = ExperienceLevelRules(
        level="Mid-Level",
        required_skills=SkillCategory(category="Required Skills", skills=list(required)),
        nice_to_have_skills=SkillCategory(category="Nice to Have Skills", skills=list(nice_to_have)),
        power_words=PowerWordCategory(verbs=list(verbs)),
    )
    return DomainRules(
        domain="test-domain",
        experience_levels={'midLevel': level},
        overall_scoring_weights=weights or ScoringWeights(),
    )


def critical(name: str, *alternatives: str) -> SkillRule:
    return SkillRule(skill=name, priority='critical', weight=0.9, alternatives=list(alternatives))


def strong_verb(verb: str) -> PowerWord:
    return PowerWord(verb=verb, strength='very high')


def bundled_document(domain: str) -> dict:
    with open(BUNDLED_RULES_DIR / f"{domain}.json", 'r', encoding='utf-8') as f:
        return json.load(f)


def write_rule_file(directory: Path, domain: str, document) -> Path:
    path = Path(directory) / f"{domain}.json"
    with open(path, 'w', encoding='utf-8') as f:
        if isinstance(document, str):
            f.write(document)
        else:
            json.dump(document, f)
    return path
