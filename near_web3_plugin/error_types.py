"""Classify NEAR node error messages into coarse error kinds."""
from __future__ import annotations

import re

UNTYPED_ERROR = "UntypedError"

# Ordered: the first matching pattern wins.
_ERROR_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^account .*? does not exist while viewing$"), "AccountDoesNotExist"),
    (re.compile(r"^Account .*? doesn't exist$"), "AccountDoesNotExist"),
    (re.compile(r"^access key .*? does not exist while viewing$"), "AccessKeyDoesNotExist"),
    (
        re.compile(
            r"wasm execution failed with error: "
            r"(FunctionCallError\()?CompilationError\(CodeDoesNotExist"
        ),
        "CodeDoesNotExist",
    ),
    (
        re.compile(
            r"wasm execution failed with error: "
            r"(FunctionCallError\()?MethodResolveError\(MethodNotFound"
        ),
        "MethodNotFound",
    ),
    (
        re.compile(
            r"Transaction nonce \d+ must be larger than nonce of the used access key \d+"
        ),
        "InvalidNonce",
    ),
)


def get_error_type_from_error_message(
    error_message: str, error_type: str | None = None
) -> str:
    """Return the error kind for a node error message.

    Falls back to ``error_type`` (usually the ``name`` field of the error
    object) and then to ``UntypedError`` when nothing matches.
    """
    for pattern, kind in _ERROR_PATTERNS:
        if pattern.search(error_message):
            return kind
    return error_type or UNTYPED_ERROR
