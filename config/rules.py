"""Validation rules applied to generated page components.

Each entry: (name, pattern, trigger, kind, message, tag)
  trigger: "missing" fires when the pattern is absent, "present" when found.
  kind:    "error" makes the artifact invalid; "warning" never does.
  tag:     severity for errors ("error" or "critical"), category for warnings.

Rules are independent of each other. Add a tuple here to add a check.
"""

import re

VALIDATION_RULES = [
    (
        "default_export",
        re.compile(r"export default"),
        "missing",
        "error",
        "Missing default export",
        "error",
    ),
    (
        "dangerous_html",
        re.compile(r"dangerouslySetInnerHTML"),
        "present",
        "warning",
        "Found dangerouslySetInnerHTML - review for XSS vulnerabilities",
        "security",
    ),
    (
        "inline_style",
        re.compile(r"style=\{\{"),
        "present",
        "warning",
        "Found inline styles - consider using Tailwind classes",
        "style",
    ),
]
