"""Project recognizers.

This module exports the recognizer model, the built-in registry and
name-based selection.
"""

from wsg.recognizers.models import PathSignature, Recognizer, SignatureKind
from wsg.recognizers.registry import (
    BUILTIN_RECOGNIZERS,
    UnknownRecognizerError,
    select_recognizers,
)

__all__ = [
    "BUILTIN_RECOGNIZERS",
    "PathSignature",
    "Recognizer",
    "SignatureKind",
    "UnknownRecognizerError",
    "select_recognizers",
]
