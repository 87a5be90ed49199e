"""Error messages for misconfigured escapers.

Escaping itself cannot fail; only invalid options are rejected, when an
EscaperOpts is built.
"""

from __future__ import annotations

from typing import Any


def generate_error_message(code: str, value: Any = None) -> str:
    """Describe a rejected EscaperOpts value.

    ``code`` is one of "invalid-escape-base", "invalid-escape-range" or
    "invalid-escape-ranges-type"; unknown codes are returned unchanged.
    """
    messages = {
        "invalid-escape-base": f"Invalid escape base {value!r} (expected 10 or 16)",
        "invalid-escape-range": (
            f"Unknown escape range {value!r} (expected 'control', 'nonbreaking-space' or 'non-ascii')"
        ),
        "invalid-escape-ranges-type": f"Escape ranges must be a collection of names, not {type(value).__name__}",
    }

    return messages.get(code, code)


class InvalidOptionError(ValueError):
    """Raised when an escaper is configured with an unsupported option value."""

    code: str
    value: Any

    def __init__(self, code: str, value: Any = None) -> None:
        self.code = code
        self.value = value
        super().__init__(generate_error_message(code, value))
