# resume_engine/config.py
import os
from dataclasses import dataclass, field
from typing import List, Dict, Optional
from pathlib import Path
import yaml

PACKAGE_DIR = Path(__file__).parent
BUNDLED_RULES_DIR = PACKAGE_DIR / "rules" / "data"
BUNDLED_RULESET = BUNDLED_RULES_DIR / "ruleset.yaml"


@dataclass
class EngineConfig:
    """Configuration for rule loading and scoring"""

    # Rule locations (None means the files bundled with the package)
    rules_dir: Optional[Path] = None
    ruleset_path: Optional[Path] = None

    # Domain used by the CLI when none is given
    default_domain: str = "web-developer"

    # Experience level whose rules drive suggestions and legacy scoring
    experience_level: str = "midLevel"

    # Verdict scoring (None keeps the scoring_formula of the rule set)
    verdict_weights: Optional[Dict[str, float]] = None
    verdict_thresholds: Optional[Dict[str, float]] = None
    red_flag_penalty_cap: float = 20
    default_jd_score: float = 70
    max_top_fixes: int = 5

    # Metrics scoring
    metrics_target: int = 5
    extra_metric_units: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Resolve rule paths"""
        self.rules_dir = Path(self.rules_dir) if self.rules_dir else BUNDLED_RULES_DIR
        self.ruleset_path = Path(self.ruleset_path) if self.ruleset_path else BUNDLED_RULESET

    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**(data.get('engine') or {}))


def get_config() -> EngineConfig:
    """Get engine configuration"""
    config_path = os.getenv('RESUME_ENGINE_CONFIG', 'config/engine.yaml')

    if os.path.exists(config_path):
        return EngineConfig.from_yaml(config_path)
    return EngineConfig()
