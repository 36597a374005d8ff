"""Default pipeline settings."""

DEFAULTS = {
    "intent_model": "claude-3-5-sonnet-20241022",
    "code_model": "gpt-4-turbo-preview",
    "intent_max_tokens": 1024,
    "code_max_tokens": 4000,
    "component_max_tokens": 2000,
    "code_temperature": 0.7,
    "repair_temperature": 0.3,
    "component_temperature": 0.7,
    "refine_temperature": 0.5,
    "default_style": "modern",
    "min_prompt_length": 10,
    "request_timeout": 120,     # seconds, passed to the SDK transport
    "anthropic_key_env": "ANTHROPIC_API_KEY",
    "openai_key_env": "OPENAI_API_KEY",
    "intent_model_env": "SITESMITH_INTENT_MODEL",
    "code_model_env": "SITESMITH_CODE_MODEL",
}
