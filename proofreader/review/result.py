"""Outcome of one proofreading run."""

from __future__ import annotations

from dataclasses import dataclass, field

from proofreader.models import ErrorRecord, ProofreadError
from proofreader.report.report_utils import issue_count_label


@dataclass
class ProofreadResult:
    """Either the ordered error list or the failure that stopped the run.

    ``partial`` is set when the model side degraded and only the rule
    findings are present; the reason is kept in ``warnings``. An empty
    ``errors`` list on a successful result means no issues were found.
    """

    errors: list[ErrorRecord] = field(default_factory=list)
    failure: ProofreadError | None = None
    partial: bool = False
    warnings: list[str] = field(default_factory=list)
    raw_response: str | None = None
    skipped_lines: int = 0

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def is_clean(self) -> bool:
        return self.ok and not self.errors

    @classmethod
    def success(cls, errors: list[ErrorRecord], **kwargs: object) -> "ProofreadResult":
        return cls(errors=list(errors), **kwargs)  # type: ignore[arg-type]

    @classmethod
    def failed(cls, failure: ProofreadError) -> "ProofreadResult":
        return cls(failure=failure)

    def unwrap(self) -> list[ErrorRecord]:
        """Return the errors or raise the failure."""
        if self.failure is not None:
            raise self.failure
        return self.errors

    def summary(self) -> str:
        if self.failure is not None:
            reason = self.failure.args[0] if self.failure.args else self.failure.user_message
            return f"Proofreading failed: {reason}"
        text = issue_count_label(len(self.errors))
        if self.partial:
            text += " (rule checks only)"
        return text
