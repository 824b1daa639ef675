"""Pipeline phases for loading graphs from line-oriented text."""

from .construction import GraphConstructionPhase
from .ingestion import TextIngestionPhase
from .parsing import GraphParseError, LineParsingPhase
from .validation import GraphValidationPhase

__all__ = [
    "TextIngestionPhase",
    "LineParsingPhase",
    "GraphConstructionPhase",
    "GraphValidationPhase",
    "GraphParseError",
]
