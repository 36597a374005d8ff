"""Prompt loading and rendering using string.Template for safe substitution."""

import os
from string import Template


def get_prompts_dir():
    """Return the absolute path to the agent prompts directory."""
    return os.path.join(os.path.dirname(os.path.dirname(__file__)), "agents", "prompts")


def load_prompt(name):
    """Load a prompt file (e.g. "intent.txt") and return its contents."""
    prompts_dir = get_prompts_dir()
    path = os.path.join(prompts_dir, name)
    resolved = os.path.realpath(path)
    if not resolved.startswith(os.path.realpath(prompts_dir) + os.sep):
        raise ValueError(f"Prompt path escapes prompts directory: {name}")
    with open(resolved, "r") as f:
        return f.read().strip()


def render_prompt(name, variables):
    """Load and render a prompt with the given variables.

    Unknown placeholders are left as-is rather than raising errors.
    """
    return Template(load_prompt(name)).safe_substitute(variables)
