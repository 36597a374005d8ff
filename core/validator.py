"""Code validation. Pure and deterministic, zero LLM calls."""

from core.state import ValidationError, ValidationResult, ValidationWarning
from config.rules import VALIDATION_RULES


def _fires(pattern, trigger, code):
    found = pattern.search(code) is not None
    return found if trigger == "present" else not found


def validate_code(code, rules=None) -> ValidationResult:
    """Run every rule against the artifact and collect findings in rule order."""
    if rules is None:
        rules = VALIDATION_RULES
    result = ValidationResult()
    for name, pattern, trigger, kind, message, tag in rules:
        if not _fires(pattern, trigger, code):
            continue
        if kind == "error":
            result.errors.append(ValidationError(message=message, severity=tag))
        else:
            result.warnings.append(ValidationWarning(message=message, category=tag))
    return result
