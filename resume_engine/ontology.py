# resume_engine/ontology.py
"""
Role and skill knowledge used by the verdict scoring path: role keywords, skill
taxonomy, named tech stacks, seniority signals and action verb strength.
"""
import math
import re
from typing import Dict, List, Optional

from resume_engine.models import Resume, RoleDomain
from resume_engine.text import extract_all_skills


ROLES: Dict[str, Dict[str, List[str]]] = {
    'frontend': {
        'keywords': ["frontend", "front-end", "ui", "ux", "web developer",
                     "react developer", "angular developer", "vue developer"],
        'primary_skills': ["React", "Vue", "Angular", "HTML", "CSS", "JavaScript", "TypeScript"],
        'concepts': ["Responsive Design", "Accessibility", "Cross-Browser Compatibility",
                     "State Management", "Component Architecture"],
    },
    'backend': {
        'keywords': ["backend", "back-end", "api", "server", "backend developer",
                     "node developer", "python developer"],
        'primary_skills': ["Node.js", "Python", "Java", "PHP", "Go", "C#", ".NET", "Ruby"],
        'concepts': ["REST", "GraphQL", "Authentication", "Security", "Database Design", "Microservices"],
    },
    'fullstack': {
        'keywords': ["full stack", "full-stack", "fullstack", "full stack developer"],
        'primary_skills': ["React", "Node.js", "MongoDB", "PostgreSQL", "Express", "Next.js"],
        'concepts': ["End-to-End", "System Design", "Deployment", "CI/CD", "DevOps Basics"],
    },
    'devops': {
        'keywords': ["devops", "sre", "infrastructure", "platform engineer", "cloud engineer"],
        'primary_skills': ["Docker", "Kubernetes", "AWS", "Azure", "GCP", "Terraform", "Jenkins"],
        'concepts': ["CI/CD", "Infrastructure as Code", "Monitoring", "Containerization",
                     "Cloud Architecture"],
    },
}

SKILL_TAXONOMY: Dict[str, List[str]] = {
    'core_languages': ["JavaScript", "HTML", "CSS", "Python", "Java", "C#", "SQL",
                       "TypeScript", "Go", "Ruby", "PHP"],
    'frontend': ["React", "Angular", "Vue", "Redux", "Tailwind", "Bootstrap", "Webpack",
                 "Vite", "Next.js", "Svelte", "jQuery"],
    'backend': ["Node.js", "Express", "Django", "Flask", "Spring Boot", "Laravel", "FastAPI",
                "NestJS", "Rails"],
    'databases': ["MySQL", "PostgreSQL", "MongoDB", "Redis", "SQL Server", "Firebase",
                  "Supabase", "DynamoDB"],
    'devops': ["Git", "Docker", "Kubernetes", "Jenkins", "AWS", "Azure", "GCP",
               "GitHub Actions", "CircleCI", "Terraform"],
    'emerging_ai': ["LLM", "LangChain", "RAG", "Vector Databases", "OpenAI API",
                    "Hugging Face", "TensorFlow", "PyTorch"],
    'security': ["OWASP", "JWT", "OAuth", "Encryption", "SSL/TLS", "CORS", "XSS Prevention",
                 "SQL Injection Prevention"],
    'testing': ["Jest", "Mocha", "Cypress", "Selenium", "Playwright", "Pytest", "JUnit",
                "React Testing Library"],
}

STACK_CLUSTERS: Dict[str, List[str]] = {
    'MERN': ["MongoDB", "Express", "React", "Node.js"],
    'MEAN': ["MongoDB", "Express", "Angular", "Node.js"],
    'LAMP': ["Linux", "Apache", "MySQL", "PHP"],
    'Microsoft': ["C#", ".NET", "Azure", "SQL Server"],
    'ModernFrontend': ["React", "TypeScript", "Next.js", "Tailwind"],
    'PythonStack': ["Python", "Django", "PostgreSQL", "Redis"],
    'JAMStack': ["JavaScript", "API", "Markup", "Next.js", "Gatsby", "Netlify"],
    'ServerlessAWS': ["AWS Lambda", "DynamoDB", "API Gateway", "S3"],
}

SENIORITY_SIGNALS: Dict[str, Dict[str, List[str]]] = {
    'junior': {
        'verbs': ["assisted", "learned", "implemented", "fixed", "updated", "helped",
                  "supported", "participated"],
        'concepts': ["learning", "mentorship", "entry-level", "training", "internship", "exposure"],
    },
    'mid': {
        'verbs': ["developed", "built", "designed", "improved", "maintained", "collaborated",
                  "contributed"],
        'concepts': ["ownership", "feature development", "bug fixing", "code review", "documentation"],
    },
    'senior': {
        'verbs': ["architected", "led", "spearheaded", "optimized", "mentored", "established",
                  "drove", "transformed"],
        'concepts': ["scalability", "strategy", "leadership", "technical direction", "system design",
                     "cross-functional"],
    },
}

SOFT_SKILL_PROXIES: Dict[str, List[str]] = {
    'collaboration': ["collaborated", "partnered", "coordinated", "facilitated", "worked with",
                      "cross-functional"],
    'communication': ["presented", "documented", "explained", "communicated", "stakeholder", "demo"],
    'problem_solving': ["debugged", "diagnosed", "resolved", "troubleshot", "investigated", "identified"],
    'leadership': ["led", "mentored", "guided", "coached", "managed", "supervised"],
}

ACTION_VERB_STRENGTH: Dict[str, List[str]] = {
    'weak': ["worked on", "was responsible for", "helped with", "involved in", "participated in"],
    'moderate': ["developed", "built", "created", "designed", "implemented", "maintained"],
    'strong': ["architected", "spearheaded", "transformed", "pioneered", "revolutionized",
               "optimized", "accelerated"],
}

METRICS_PATTERNS = [
    re.compile(p, re.IGNORECASE) for p in (
        r"\d+%",
        r"\d+x",
        r"\$\d+",
        r"\d+ users",
        r"\d+ team",
        r"\d+ projects",
        r"reduced.*\d+",
        r"increased.*\d+",
        r"improved.*\d+",
        r"saved.*\d+",
    )
]


def _fuzzy_member(needle: str, haystack: List[str]) -> bool:
    """True when needle contains, or is contained in, any lowercase haystack entry"""
    needle = needle.lower()
    return any(item in needle or needle in item for item in haystack)


def detect_role_from_title(title: str) -> RoleDomain:
    """Detect role type from a job title or description"""
    lower_title = (title or '').lower()

    for role, data in ROLES.items():
        for keyword in data['keywords']:
            if keyword.lower() in lower_title:
                return RoleDomain(role)

    return RoleDomain.OTHER


def get_relevant_skills(role: RoleDomain) -> List[str]:
    """Primary skills for the role plus the first five core languages"""
    role_data = ROLES.get(role.value)
    if not role_data:
        return []
    return role_data['primary_skills'] + SKILL_TAXONOMY['core_languages'][:5]


def detect_seniority(text: str) -> str:
    """
    Classify text as 'junior', 'mid' or 'senior'

    Three or more senior signals win; otherwise three or more junior signals;
    anything else is mid level.
    """
    lower_text = (text or '').lower()

    def signal_count(level: str) -> int:
        signals = SENIORITY_SIGNALS[level]
        return sum(1 for s in signals['verbs'] + signals['concepts'] if s.lower() in lower_text)

    if signal_count('senior') >= 3:
        return 'senior'
    if signal_count('junior') >= 3:
        return 'junior'
    return 'mid'


def find_stack_cluster(skills: List[str]) -> Optional[str]:
    """Name of the first stack with at least half of its technologies present"""
    lower_skills = [s.lower() for s in skills]

    for stack_name, stack_skills in STACK_CLUSTERS.items():
        match_count = sum(1 for s in stack_skills if _fuzzy_member(s, lower_skills))
        if match_count >= math.ceil(len(stack_skills) / 2):
            return stack_name

    return None


def has_github_or_portfolio(resume: Resume) -> bool:
    info = resume.personal_info
    return bool(info.github or info.portfolio or info.linkedin)


def count_metrics(text: str) -> int:
    """Count numbers, percentages, money and improvement phrases in text"""
    text = text or ''
    return sum(len(pattern.findall(text)) for pattern in METRICS_PATTERNS)


def analyze_verb_strength(text: str) -> Dict[str, float]:
    """
    Count weak, moderate and strong action phrases present in text

    Returns:
        Dict with 'weak', 'moderate', 'strong' counts and 'ratio' (strong / total, 0 if none)
    """
    lower_text = (text or '').lower()
    counts = {
        strength: sum(1 for phrase in phrases if phrase in lower_text)
        for strength, phrases in ACTION_VERB_STRENGTH.items()
    }

    total = counts['weak'] + counts['moderate'] + counts['strong']
    counts['ratio'] = counts['strong'] / total if total > 0 else 0
    return counts


def get_missing_role_skills(resume: Resume, role: RoleDomain) -> List[str]:
    user_skills = [s.lower() for s in extract_all_skills(resume)]
    return [skill for skill in get_relevant_skills(role)
            if not _fuzzy_member(skill, user_skills)]
