"""
Error handling utilities for consistent error message extraction.
"""

import pydantic


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.

    Validation errors are flattened to ``field.path: message`` pairs
    so a malformed signal bundle names the offending fields.
    """
    if isinstance(error, pydantic.ValidationError):
        parts = []
        for detail in error.errors():
            location = ".".join(str(p) for p in detail.get("loc", ()))
            parts.append(f"{location}: {detail.get('msg', 'invalid value')}")
        return "; ".join(parts) or str(error)
    if isinstance(error, Exception):
        return str(error) or type(error).__name__
    return "Unknown error"
