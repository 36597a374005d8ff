"""Code repairer — one best-effort fix pass over an invalid artifact."""

import logging

from config.defaults import DEFAULTS
from core.state import RepairOutcome, ValidationError
from utils.template_engine import load_prompt

logger = logging.getLogger(__name__)


class CodeRepairer:
    """Asks the code model to fix validation errors.

    The fixed text replaces the artifact wholesale. If the call fails for any reason,
    the original artifact comes back unchanged instead of an exception.
    """

    name = "code_repairer"

    def __init__(self, client, model=None, max_tokens=None, temperature=None):
        self.client = client
        self.model = model or DEFAULTS["code_model"]
        self.max_tokens = max_tokens or DEFAULTS["code_max_tokens"]
        self.temperature = DEFAULTS["repair_temperature"] if temperature is None else temperature

    def run(self, code, errors: list[ValidationError]) -> RepairOutcome:
        error_messages = "\n".join(e.message for e in errors)
        messages = [
            {"role": "system", "content": load_prompt("repair.txt")},
            {"role": "user", "content": f"Fix these errors in the code:\n\n{error_messages}\n\nCode:\n{code}"},
        ]
        try:
            fixed = self.client.complete(
                messages, model=self.model,
                max_tokens=self.max_tokens, temperature=self.temperature,
            )
        except Exception as e:
            logger.warning("[repair] failed, keeping original code: %s", e, exc_info=True)
            return RepairOutcome(code=code, repaired=False, error=str(e))

        if not fixed:
            return RepairOutcome(code=code, repaired=False, error="Repair returned no code")
        return RepairOutcome(code=fixed, repaired=True)
