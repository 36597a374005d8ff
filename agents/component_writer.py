"""Component writer — generates one reusable component from a short description."""

from config.defaults import DEFAULTS
from core.errors import EmptyResponseError
from utils.template_engine import render_prompt


class ComponentWriter:
    """Single code-model call. An empty completion yields an empty string."""

    name = "component_writer"

    def __init__(self, client, model=None):
        self.client = client
        self.model = model or DEFAULTS["code_model"]

    def run(self, name, description, style=None):
        style = style or DEFAULTS["default_style"]
        messages = [
            {"role": "system", "content": render_prompt("component.txt", {"style": style})},
            {"role": "user", "content": f"Create a {name} component: {description}"},
        ]
        try:
            return self.client.complete(
                messages, model=self.model,
                max_tokens=DEFAULTS["component_max_tokens"],
                temperature=DEFAULTS["component_temperature"],
            )
        except EmptyResponseError:
            return ""
