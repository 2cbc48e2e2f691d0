# resume_engine/__init__.py
"""
Rule-based resume scoring and suggestions for tech career domains
"""

from resume_engine.config import EngineConfig, get_config
from resume_engine.engine import RuleEngine
from resume_engine.errors import EngineNotInitializedError, RuleLoadError
from resume_engine.jd_parser import JobDescriptionParser
from resume_engine.models import JobContext, Resume, RoleDomain
from resume_engine.report import generate_report

__version__ = "0.1.0"

__all__ = [
    'EngineConfig',
    'get_config',
    'RuleEngine',
    'EngineNotInitializedError',
    'RuleLoadError',
    'JobDescriptionParser',
    'JobContext',
    'Resume',
    'RoleDomain',
    'generate_report',
]
