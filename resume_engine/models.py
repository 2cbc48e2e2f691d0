# resume_engine/models.py
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from enum import Enum
import json


class SectionType(Enum):
    """Editable sections of a resume"""
    PERSONAL = "personal"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    PUBLICATIONS = "publications"
    ACHIEVEMENTS = "achievements"
    CERTIFICATIONS = "certifications"
    LANGUAGES = "languages"
    VOLUNTEER = "volunteer"


class RoleDomain(Enum):
    """Role type a job context targets"""
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    DEVOPS = "devops"
    OTHER = "other"


def _str(data: Dict[str, Any], *keys: str, default: str = "") -> str:
    """First non-null value among keys, as a string"""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return str(value)
    return default


def _opt(data: Dict[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if value:
            return str(value)
    return None


def _list(data: Dict[str, Any], *keys: str) -> List[str]:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            return [value] if value.strip() else []
        return [str(v) for v in value if v is not None]
    return []


def _int(data: Dict[str, Any], *keys: str) -> Optional[int]:
    for key in keys:
        value = data.get(key)
        if value is None or value == '':
            continue
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
    return None


@dataclass
class PersonalInfo:
    """Contact details and professional summary"""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'PersonalInfo':
        data = data or {}
        return cls(
            full_name=_str(data, 'fullName', 'full_name', 'name'),
            email=_str(data, 'email'),
            phone=_str(data, 'phone'),
            location=_str(data, 'location'),
            linkedin=_opt(data, 'linkedin'),
            github=_opt(data, 'github'),
            portfolio=_opt(data, 'portfolio', 'website'),
            summary=_str(data, 'summary'),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'fullName': self.full_name,
            'email': self.email,
            'phone': self.phone,
            'location': self.location,
            'linkedin': self.linkedin,
            'github': self.github,
            'portfolio': self.portfolio,
            'summary': self.summary,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class Experience:
    """Work experience entry"""
    company: str = ""
    position: str = ""
    description: str = ""
    id: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Experience':
        return cls(
            company=_str(data, 'company'),
            position=_str(data, 'position', 'title'),
            description=_str(data, 'description'),
            id=_str(data, 'id'),
            location=_str(data, 'location'),
            start_date=_str(data, 'startDate', 'start_date'),
            end_date=_str(data, 'endDate', 'end_date'),
            current=bool(data.get('current', False)),
            achievements=_list(data, 'achievements'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'company': self.company,
            'position': self.position,
            'location': self.location,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'current': self.current,
            'description': self.description,
            'achievements': list(self.achievements),
        }


@dataclass
class Education:
    """Education entry"""
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    id: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Education':
        return cls(
            institution=_str(data, 'institution'),
            degree=_str(data, 'degree'),
            field_of_study=_str(data, 'field', 'fieldOfStudy', 'field_of_study'),
            id=_str(data, 'id'),
            location=_str(data, 'location'),
            start_date=_str(data, 'startDate', 'start_date'),
            end_date=_str(data, 'endDate', 'end_date'),
            gpa=_opt(data, 'gpa'),
            achievements=_list(data, 'achievements'),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'institution': self.institution,
            'degree': self.degree,
            'field': self.field_of_study,
            'location': self.location,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'achievements': list(self.achievements),
        }
        if self.gpa is not None:
            data['gpa'] = self.gpa
        return data


@dataclass
class SkillGroup:
    """A category of skills (e.g. 'Frontend': React, CSS)"""
    category: str = ""
    skills: List[str] = field(default_factory=list)
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SkillGroup':
        return cls(
            category=_str(data, 'category'),
            skills=_list(data, 'skills'),
            id=_str(data, 'id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'category': self.category, 'skills': list(self.skills)}


@dataclass
class Project:
    """Personal or academic project"""
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    id: str = ""
    link: Optional[str] = None
    start_date: str = ""
    end_date: str = ""
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        return cls(
            name=_str(data, 'name'),
            description=_str(data, 'description'),
            technologies=_list(data, 'technologies'),
            id=_str(data, 'id'),
            link=_opt(data, 'link'),
            start_date=_str(data, 'startDate', 'start_date'),
            end_date=_str(data, 'endDate', 'end_date'),
            highlights=_list(data, 'highlights'),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'technologies': list(self.technologies),
            'startDate': self.start_date,
            'endDate': self.end_date,
            'highlights': list(self.highlights),
        }
        if self.link is not None:
            data['link'] = self.link
        return data


@dataclass
class Publication:
    title: str = ""
    authors: List[str] = field(default_factory=list)
    venue: str = ""
    date: str = ""
    link: Optional[str] = None
    description: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Publication':
        return cls(
            title=_str(data, 'title'),
            authors=_list(data, 'authors'),
            venue=_str(data, 'venue'),
            date=_str(data, 'date'),
            link=_opt(data, 'link'),
            description=_str(data, 'description'),
            id=_str(data, 'id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'authors': list(self.authors),
            'venue': self.venue,
            'date': self.date,
            'link': self.link,
            'description': self.description,
        }


@dataclass
class Achievement:
    title: str = ""
    date: str = ""
    description: str = ""
    issuer: Optional[str] = None
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Achievement':
        return cls(
            title=_str(data, 'title'),
            date=_str(data, 'date'),
            description=_str(data, 'description'),
            issuer=_opt(data, 'issuer'),
            id=_str(data, 'id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'date': self.date,
            'description': self.description,
            'issuer': self.issuer,
        }


@dataclass
class Certification:
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: Optional[str] = None
    credential_id: Optional[str] = None
    link: Optional[str] = None
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Certification':
        return cls(
            name=_str(data, 'name'),
            issuer=_str(data, 'issuer'),
            date=_str(data, 'date'),
            expiry_date=_opt(data, 'expiryDate', 'expiry_date'),
            credential_id=_opt(data, 'credentialId', 'credential_id'),
            link=_opt(data, 'link'),
            id=_str(data, 'id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'issuer': self.issuer,
            'date': self.date,
            'expiryDate': self.expiry_date,
            'credentialId': self.credential_id,
            'link': self.link,
        }


@dataclass
class Language:
    language: str = ""
    proficiency: str = "Professional"  # Native, Fluent, Professional, Intermediate, Basic
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Language':
        return cls(
            language=_str(data, 'language'),
            proficiency=_str(data, 'proficiency', default='Professional'),
            id=_str(data, 'id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'language': self.language, 'proficiency': self.proficiency}


@dataclass
class VolunteerWork:
    organization: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VolunteerWork':
        return cls(
            organization=_str(data, 'organization'),
            role=_str(data, 'role'),
            start_date=_str(data, 'startDate', 'start_date'),
            end_date=_str(data, 'endDate', 'end_date'),
            current=bool(data.get('current', False)),
            description=_str(data, 'description'),
            id=_str(data, 'id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'organization': self.organization,
            'role': self.role,
            'startDate': self.start_date,
            'endDate': self.end_date,
            'current': self.current,
            'description': self.description,
        }


@dataclass
class JobContext:
    """Target job the resume is evaluated against"""
    domain: RoleDomain = RoleDomain.OTHER
    position: str = ""
    job_description: str = ""
    required_skills: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)
    experience_years: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobContext':
        domain = _str(data, 'domain', default='other').lower()
        try:
            role = RoleDomain(domain)
        except ValueError:
            role = RoleDomain.OTHER
        return cls(
            domain=role,
            position=_str(data, 'position', 'title'),
            job_description=_str(data, 'jobDescription', 'job_description'),
            required_skills=_list(data, 'requiredSkills', 'required_skills'),
            preferred_skills=_list(data, 'preferredSkills', 'preferred_skills'),
            experience_years=_int(data, 'experienceYears', 'experience_years'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'domain': self.domain.value,
            'position': self.position,
            'jobDescription': self.job_description,
            'requiredSkills': list(self.required_skills),
            'preferredSkills': list(self.preferred_skills),
            'experienceYears': self.experience_years,
        }


@dataclass
class Resume:
    """Complete resume as edited in the builder"""
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experiences: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[SkillGroup] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)

    # Optional sections
    publications: List[Publication] = field(default_factory=list)
    achievements: List[Achievement] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    volunteer_work: List[VolunteerWork] = field(default_factory=list)

    # Metadata
    id: str = ""
    name: str = ""
    template: str = "modern"
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Resume':
        """Build a resume from the JSON blob stored by the editor"""
        return cls(
            personal_info=PersonalInfo.from_dict(data.get('personalInfo') or data.get('personal_info')),
            experiences=[Experience.from_dict(e) for e in data.get('experiences') or []],
            education=[Education.from_dict(e) for e in data.get('education') or []],
            skills=[SkillGroup.from_dict(s) for s in data.get('skills') or []],
            projects=[Project.from_dict(p) for p in data.get('projects') or []],
            publications=[Publication.from_dict(p) for p in data.get('publications') or []],
            achievements=[Achievement.from_dict(a) for a in data.get('achievements') or []],
            certifications=[Certification.from_dict(c) for c in data.get('certifications') or []],
            languages=[Language.from_dict(lang) for lang in data.get('languages') or []],
            volunteer_work=[
                VolunteerWork.from_dict(v)
                for v in data.get('volunteerWork') or data.get('volunteer_work') or []
            ],
            id=_str(data, 'id'),
            name=_str(data, 'name'),
            template=_str(data, 'template', default='modern'),
            created_at=_str(data, 'createdAt', 'created_at'),
            updated_at=_str(data, 'updatedAt', 'updated_at'),
        )

    @classmethod
    def from_json(cls, text: str) -> 'Resume':
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary the editor persists"""
        return {
            'id': self.id,
            'name': self.name,
            'template': self.template,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
            'personalInfo': self.personal_info.to_dict(),
            'experiences': [e.to_dict() for e in self.experiences],
            'education': [e.to_dict() for e in self.education],
            'skills': [s.to_dict() for s in self.skills],
            'projects': [p.to_dict() for p in self.projects],
            'publications': [p.to_dict() for p in self.publications],
            'achievements': [a.to_dict() for a in self.achievements],
            'certifications': [c.to_dict() for c in self.certifications],
            'languages': [lang.to_dict() for lang in self.languages],
            'volunteerWork': [v.to_dict() for v in self.volunteer_work],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self):
        return (
            f"<Resume: {self.personal_info.full_name or 'Unnamed'} | "
            f"{len(self.experiences)} experiences | {len(self.projects)} projects>"
        )
