# resume_engine/jd_parser.py
import re
import logging
from typing import List, Optional, Tuple

from resume_engine.models import JobContext
from resume_engine.ontology import SKILL_TAXONOMY, detect_role_from_title
from resume_engine.text import unique

logger = logging.getLogger(__name__)


class JobDescriptionParser:
    """
    Turn raw job description text into a JobContext
    """

    # Years of experience
    EXPERIENCE_PATTERNS = [
        r'(\d+)\+?\s*(?:years?|yrs?)\s+(?:of\s+)?experience',
        r'experience\s+of\s+(\d+)\+?\s*(?:years?|yrs?)',
        r'minimum\s+(\d+)\s+(?:years?|yrs?)',
        r'at least\s+(\d+)\s+(?:years?|yrs?)',
    ]

    # Everything after the first of these counts as preferred
    PREFERRED_MARKERS = ('prefer', 'nice to have')

    TITLE_KEYWORDS = [
        'engineer', 'developer', 'manager', 'lead', 'architect', 'analyst',
        'specialist', 'designer', 'scientist', 'administrator', 'sre', 'devops',
    ]

    SKIP_TITLE_LINES = ['about', 'we are', 'location:', 'responsibilities', 'requirements']

    def parse(self, jd_text: str, title: Optional[str] = None) -> JobContext:
        """
        Parse job description text

        Args:
            jd_text: Full job description text
            title: Job title, if known; otherwise taken from the first lines

        Returns:
            JobContext with role domain, required/preferred skills and years
        """
        position = title or self.extract_title(jd_text)
        required, preferred = self.extract_skills(jd_text)

        context = JobContext(
            domain=detect_role_from_title(position),
            position=position,
            job_description=jd_text,
            required_skills=required,
            preferred_skills=preferred,
            experience_years=self.extract_experience_years(jd_text),
        )

        logger.info(
            f"Parsed JD: {context.position} ({context.domain.value}) - "
            f"{len(required)} required, {len(preferred)} preferred skills"
        )
        return context

    def extract_skills(self, jd_text: str) -> Tuple[List[str], List[str]]:
        """
        Split known skills into required and preferred

        A skill is required when its first mention comes before the first
        "prefer"/"nice to have" marker, preferred otherwise.
        """
        jd_lower = (jd_text or '').lower()
        split_at = len(jd_lower)
        for marker in self.PREFERRED_MARKERS:
            index = jd_lower.find(marker)
            if index != -1:
                split_at = index
                break

        required, preferred = [], []
        for skills in SKILL_TAXONOMY.values():
            for skill in skills:
                index = jd_lower.find(skill.lower())
                if index == -1:
                    continue
                if index < split_at:
                    required.append(skill)
                else:
                    preferred.append(skill)

        return unique(required), unique(preferred)

    def extract_title(self, text: str) -> str:
        """Job title from the first lines of the description"""
        lines = (text or '').strip().split('\n')

        for line in lines[:10]:
            line = line.strip()
            if not line:
                continue
            if any(skip in line.lower() for skip in self.SKIP_TITLE_LINES):
                continue

            if 3 < len(line) < 100:
                title = re.sub(r'^#+\s*', '', line)      # Markdown headers
                title = re.sub(r'\*+', '', title)        # Emphasis
                title = re.sub(r'^[-•]\s*', '', title)   # Bullets
                title = title.strip().rstrip(':')

                if any(keyword in title.lower() for keyword in self.TITLE_KEYWORDS):
                    return title
                if len(title.split()) <= 8:
                    return title

        return "Unknown Position"

    def extract_experience_years(self, text: str) -> Optional[int]:
        """Required years of experience"""
        for pattern in self.EXPERIENCE_PATTERNS:
            match = re.search(pattern, text or '', re.IGNORECASE)
            if match:
                return int(match.group(1))
        return None
