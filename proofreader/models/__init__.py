"""Public model exports for the project.

Tests and other modules should import
``from proofreader.models import ErrorRecord, ErrorKind``.
"""

from __future__ import annotations

from .context import DateContext, ProjectMetadata, ProofreadContext
from .enums import DEFAULT_EXPLANATIONS, ErrorKind, StyleSubstitutionMode
from .error_record import ErrorRecord
from .errors import InputError, ProofreadError

__all__ = [
    "DEFAULT_EXPLANATIONS",
    "DateContext",
    "ErrorKind",
    "ErrorRecord",
    "InputError",
    "ProjectMetadata",
    "ProofreadContext",
    "ProofreadError",
    "StyleSubstitutionMode",
]
