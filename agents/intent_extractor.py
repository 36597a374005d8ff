"""Intent extractor — turns a free-text prompt into a structured generation context."""

import json
import logging

from config.defaults import DEFAULTS
from core.errors import IntentParseError
from core.state import GenerationContext
from utils.llm import extract_json_object
from utils.template_engine import load_prompt

logger = logging.getLogger(__name__)

_LIST_FIELDS = ("pages", "features", "components")
_STRING_FIELDS = ("intent", "style")


def _parse_context(data) -> GenerationContext:
    """Check the decoded JSON against the context shape. Values pass through as-is."""
    if not isinstance(data, dict):
        raise IntentParseError("Intent must be a JSON object")

    for key in _STRING_FIELDS:
        if not isinstance(data.get(key), str):
            raise IntentParseError(f"Intent field '{key}' must be a string")
    for key in _LIST_FIELDS:
        value = data.get(key)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise IntentParseError(f"Intent field '{key}' must be a list of strings")

    if not data["pages"]:
        raise IntentParseError("Intent must name at least one page")
    if not data["style"].strip():
        raise IntentParseError("Intent must name a style")

    return GenerationContext(
        intent=data["intent"],
        pages=list(data["pages"]),
        features=list(data["features"]),
        style=data["style"],
        components=list(data["components"]),
    )


class IntentExtractor:
    """Asks the understanding model for a JSON intent and validates its shape."""

    name = "intent_extractor"

    def __init__(self, client, model=None, max_tokens=None):
        self.client = client
        self.model = model or DEFAULTS["intent_model"]
        self.max_tokens = max_tokens or DEFAULTS["intent_max_tokens"]

    def run(self, prompt) -> GenerationContext:
        messages = [
            {"role": "system", "content": load_prompt("intent.txt")},
            {"role": "user", "content": prompt},
        ]
        text = self.client.complete(messages, model=self.model, max_tokens=self.max_tokens)

        raw = extract_json_object(text)
        if raw is None:
            raise IntentParseError("Failed to parse intent from Claude response")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise IntentParseError(f"Intent is not valid JSON: {e}") from e

        context = _parse_context(data)
        logger.info("[intent] %s (%d page(s))", context.intent, len(context.pages))
        return context
