"""Code synthesizer — writes a page component from a generation context."""

from config.defaults import DEFAULTS
from core.errors import CodeGenerationError, EmptyResponseError
from core.state import GenerationContext
from utils.template_engine import render_prompt


def build_user_message(context: GenerationContext):
    return (
        f"Create a {context.intent} website with the following specifications:\n\n"
        f"Pages: {', '.join(context.pages)}\n"
        f"Features: {', '.join(context.features)}\n"
        f"Style: {context.style}\n"
        f"Components: {', '.join(context.components)}\n\n"
        "Generate the main page component with all these elements integrated."
    )


class CodeSynthesizer:
    """Produces the raw page component text. Output is not sanitized here."""

    name = "code_synthesizer"

    def __init__(self, client, model=None, max_tokens=None, temperature=None):
        self.client = client
        self.model = model or DEFAULTS["code_model"]
        self.max_tokens = max_tokens or DEFAULTS["code_max_tokens"]
        self.temperature = DEFAULTS["code_temperature"] if temperature is None else temperature

    def run(self, context: GenerationContext, style) -> str:
        messages = [
            {"role": "system", "content": render_prompt("synthesizer.txt", {"style": style})},
            {"role": "user", "content": build_user_message(context)},
        ]
        try:
            code = self.client.complete(
                messages, model=self.model,
                max_tokens=self.max_tokens, temperature=self.temperature,
            )
        except EmptyResponseError as e:
            raise CodeGenerationError(f"Failed to generate code from {self.model}") from e

        if not code:
            raise CodeGenerationError(f"Failed to generate code from {self.model}")
        return code
