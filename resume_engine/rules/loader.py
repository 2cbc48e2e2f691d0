# resume_engine/rules/loader.py
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from resume_engine.config import BUNDLED_RULES_DIR
from resume_engine.errors import RuleLoadError
from resume_engine.rules.cache import RuleCache
from resume_engine.rules.models import DomainRules
from resume_engine.rules.shapes import DEFAULT_SHAPES
from resume_engine.rules.validator import RuleSetValidator

logger = logging.getLogger(__name__)

SUPPORTED_DOMAINS = (
    'web-developer',
    'data-scientist',
    'cyber-security',
    'aiml-engineer',
    'devops-engineer',
)


class RuleLoader:
    """
    Load and cache domain rule bundles

    Each domain lives in ``<rules_dir>/<domain>.json``. The file layout is
    recognised by the ordered shape detectors; the first matching shape builds
    the canonical DomainRules.
    """

    def __init__(
        self,
        rules_dir: Optional[Path] = None,
        cache: Optional[RuleCache] = None,
        shapes: Optional[Sequence] = None,
        domains: Sequence[str] = SUPPORTED_DOMAINS
    ):
        self.rules_dir = Path(rules_dir) if rules_dir else BUNDLED_RULES_DIR
        self.cache = cache if cache is not None else RuleCache()
        self.shapes = list(shapes) if shapes is not None else list(DEFAULT_SHAPES)
        self.domains = tuple(domains)
        self.validator = RuleSetValidator()

    def load_rules(self, domain: str) -> DomainRules:
        """
        Load rules for a domain (e.g. 'web-developer')

        Raises:
            RuleLoadError: Unknown domain, missing or malformed file, unknown layout
        """
        cached = self.cache.get(domain)
        if cached is not None:
            logger.debug(f"Using cached rules for: {domain}")
            return cached

        hint = f"Make sure {domain}.json exists in {self.rules_dir}"
        if domain not in self.domains:
            raise RuleLoadError(domain, "No rules available", hint)

        path = self.rules_dir / f"{domain}.json"
        if not path.exists():
            raise RuleLoadError(domain, "No rules available", hint)

        logger.info(f"Loading rules for: {domain}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RuleLoadError(domain, f"Malformed rule file {path.name}: {e}", hint) from e

        if not isinstance(document, dict):
            raise RuleLoadError(domain, f"Malformed rule file {path.name}", hint)

        rules = self._build(document, domain)

        is_valid, issues = self.validator.validate_domain(rules)
        for issue in issues:
            if not issue.startswith("INFO"):
                logger.warning(issue)
        if not is_valid:
            raise RuleLoadError(domain, "Invalid rule set", hint)

        self.cache.put(domain, rules)
        logger.info(f"Loaded and cached rules for: {domain} ({len(rules.experience_levels)} levels)")
        return rules

    def _build(self, document: dict, domain: str) -> DomainRules:
        """Try each shape detector in order"""
        for shape in self.shapes:
            payload = shape.detect(document, domain)
            if payload is None:
                continue
            logger.debug(f"Rule file for {domain} matched shape: {shape.name}")
            try:
                return shape.build(payload, domain)
            except (TypeError, ValueError, AttributeError) as e:
                raise RuleLoadError(domain, f"Invalid {shape.name} rule file: {e}") from e

        raise RuleLoadError(
            domain,
            "Unrecognised rule file structure",
            f"Expected one of: {', '.join(s.name for s in self.shapes)}"
        )

    def get_available_domains(self) -> List[str]:
        return list(self.domains)

    def is_domain_available(self, domain: str) -> bool:
        try:
            self.load_rules(domain)
            return True
        except RuleLoadError:
            return False

    def get_cached_domain(self, domain: str) -> Optional[DomainRules]:
        return self.cache.get(domain)

    def preload_domains(self, domains: Iterable[str]):
        """Load several domains; failures are logged, not raised"""
        domains = list(domains)
        logger.info(f"Preloading {len(domains)} domains...")

        for domain in domains:
            try:
                self.load_rules(domain)
            except RuleLoadError as e:
                logger.warning(f"Failed to preload {domain}: {e}")

        logger.info("Preloading complete")

    def clear_cache(self):
        self.cache.clear()
