# resume_engine/errors.py
from typing import Optional


class EngineNotInitializedError(RuntimeError):
    def __init__(self, message: str = "Rule engine not initialized. Call initialize() first."):
        super().__init__(message)


class RuleLoadError(RuntimeError):
    """Raised when a domain rule bundle is unknown, unreadable or malformed"""

    def __init__(self, domain: str, reason: str, hint: Optional[str] = None):
        self.domain = domain
        self.reason = reason
        self.hint = hint
        message = f"{reason} for domain: {domain}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)
