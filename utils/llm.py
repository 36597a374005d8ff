"""Provider clients for the two model backends, plus response helpers.

Each client wraps a single completion endpoint:

    complete(messages, model, max_tokens, temperature=None) -> str

Messages are ``{"role": ..., "content": ...}`` dicts. Credentials are read
from the environment on first call, not at import or construction time.
"""

import logging
import os
import threading
from abc import ABC, abstractmethod

import anthropic
import openai

from config.defaults import DEFAULTS
from core.errors import ConfigurationError, EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)


class ProviderClient(ABC):
    """Lazily builds one SDK handle and reuses it for every call."""

    name = "provider"
    key_env = ""
    signup_url = ""

    def __init__(self, api_key=None, timeout=None):
        self._api_key = api_key
        self._timeout = timeout or DEFAULTS["request_timeout"]
        self._client = None
        self._lock = threading.Lock()

    @abstractmethod
    def complete(self, messages, model, max_tokens, temperature=None):
        """Return the completion text for an ordered list of role-tagged messages."""

    def _get_client(self):
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._build_client(self._resolve_key())
        return self._client

    def _resolve_key(self):
        api_key = self._api_key or os.environ.get(self.key_env)
        if not api_key:
            raise ConfigurationError(
                f"{self.key_env} is not configured. "
                f"Get a key at {self.signup_url} and run:\n"
                f"  export {self.key_env}='your-key-here'"
            )
        return api_key

    @abstractmethod
    def _build_client(self, api_key):
        """Return the SDK handle for this provider."""


class AnthropicClient(ProviderClient):
    """Claude Messages API. Used for understanding free-text prompts."""

    name = "anthropic"
    key_env = DEFAULTS["anthropic_key_env"]
    signup_url = "https://console.anthropic.com/"

    def _build_client(self, api_key):
        return anthropic.Anthropic(api_key=api_key, timeout=self._timeout)

    def complete(self, messages, model, max_tokens, temperature=None):
        client = self._get_client()

        # The Messages API takes the system prompt as its own parameter
        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        kwargs = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [
                {"role": m["role"], "content": m["content"]}
                for m in messages if m["role"] != "system"
            ],
        }
        if system:
            kwargs["system"] = system
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            response = client.messages.create(**kwargs)
        except anthropic.APIError as e:
            raise ProviderError(f"Anthropic request failed: {e}") from e

        text = "".join(
            block.text for block in (response.content or [])
            if getattr(block, "type", None) == "text"
        )
        if not text.strip():
            raise EmptyResponseError("Unexpected response type from Claude")

        logger.debug("[anthropic] %s returned %d chars", model, len(text))
        return text


class OpenAIClient(ProviderClient):
    """OpenAI Chat Completions API. Used for writing and fixing code."""

    name = "openai"
    key_env = DEFAULTS["openai_key_env"]
    signup_url = "https://platform.openai.com/api-keys"

    def _build_client(self, api_key):
        return openai.OpenAI(api_key=api_key, timeout=self._timeout)

    def complete(self, messages, model, max_tokens, temperature=None):
        client = self._get_client()

        kwargs = {
            "model": model,
            "messages": [{"role": m["role"], "content": m["content"]} for m in messages],
            "max_tokens": max_tokens,
        }
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            completion = client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        text = None
        if completion.choices:
            text = completion.choices[0].message.content
        if not text or not text.strip():
            raise EmptyResponseError(f"{model} returned an empty completion")

        logger.debug("[openai] %s returned %d chars", model, len(text))
        return text


def extract_json_object(text):
    """Return the first balanced ``{...}`` substring of text, or None.

    Brace depth is tracked outside JSON string literals only, so braces
    inside quoted values (and escaped quotes) do not break the pairing.
    Anything before or after the object, such as a prose preamble or a
    markdown fence, is discarded.
    """
    start = text.find("{")
    while start != -1:
        end = _match_brace(text, start)
        if end is not None:
            return text[start:end + 1]
        start = text.find("{", start + 1)
    return None


def _match_brace(text, start):
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None
