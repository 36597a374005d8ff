"""Failure taxonomy for the generation pipeline."""


class GenerationError(Exception):
    """Base class for every failure a pipeline stage can raise."""


class ConfigurationError(GenerationError):
    """Provider credentials are missing. Operator-fixable, not retryable."""


class ProviderError(GenerationError):
    """Transport or HTTP failure talking to a model provider."""


class EmptyResponseError(GenerationError):
    """The provider answered but returned no usable text."""


class CodeGenerationError(EmptyResponseError):
    """The code provider returned an empty or missing completion."""


class IntentParseError(GenerationError):
    """Model output held no structured intent matching the expected shape."""
