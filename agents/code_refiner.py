"""Code refiner — rewrites existing code according to user feedback."""

from config.defaults import DEFAULTS
from core.errors import EmptyResponseError
from utils.template_engine import load_prompt


class CodeRefiner:
    """Single code-model call. An empty completion leaves the code as it was."""

    name = "code_refiner"

    def __init__(self, client, model=None):
        self.client = client
        self.model = model or DEFAULTS["code_model"]

    def run(self, code, feedback):
        messages = [
            {"role": "system", "content": load_prompt("refine.txt")},
            {"role": "user", "content": f"Current code:\n{code}\n\nFeedback: {feedback}\n\nProvide the refined code."},
        ]
        try:
            return self.client.complete(
                messages, model=self.model,
                max_tokens=DEFAULTS["code_max_tokens"],
                temperature=DEFAULTS["refine_temperature"],
            )
        except EmptyResponseError:
            return code
