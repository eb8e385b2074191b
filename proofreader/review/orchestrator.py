"""Single entry point for a proofreading run.

``Proofreader.run`` validates the input, starts the model call on a worker
thread, runs the rule checkers on the caller's thread, then parses and
merges. Provider failures produce a failed :class:`ProofreadResult`; a
malformed model body degrades to the rule findings with ``partial=True``
unless the configuration asks for a hard failure.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import time
from typing import Callable, Protocol

from proofreader.config import ProofreaderConfiguration
from proofreader.llm.provider import (
    LLMProviderError,
    MalformedResponseError,
    ProviderReporter,
    RunCancelledError,
)
from proofreader.llm.provider_registry import create_provider_chain
from proofreader.llm.service import LLMService
from proofreader.models import ErrorRecord, InputError, ProofreadContext
from proofreader.parsing import ResponseParser
from proofreader.rules import RuleEngine

from .merger import merge
from .prompt_factory import build_prompt
from .result import ProofreadResult

LOGGER = logging.getLogger(__name__)

_POLL_INTERVAL = 0.1


class TextGenerator(Protocol):
    name: str

    def generate(self, prompt: str) -> str: ...


class Proofreader:
    """Sequence the rule engine, the model call and the merge."""

    def __init__(
        self,
        llm: TextGenerator | None,
        *,
        configuration: ProofreaderConfiguration | None = None,
        rule_engine: RuleEngine | None = None,
        parser: ResponseParser | None = None,
        prompt_builder: Callable[[str, ProofreadContext], str] = build_prompt,
    ) -> None:
        self.configuration = configuration or ProofreaderConfiguration()
        self.llm = llm
        self.rule_engine = rule_engine or RuleEngine(style_mode=self.configuration.style_mode)
        self.parser = parser or ResponseParser()
        self._prompt_builder = prompt_builder

    @classmethod
    def from_configuration(
        cls,
        configuration: ProofreaderConfiguration,
        *,
        provider: str | None = None,
        reporter: ProviderReporter | None = None,
    ) -> "Proofreader":
        """Build a proofreader backed by the configured provider chain."""
        providers = create_provider_chain(configuration, primary=provider)
        LOGGER.info("Using LLM provider(s): %s", ", ".join(p.name for p in providers))
        return cls(LLMService(providers, reporter=reporter), configuration=configuration)

    def validate_input(self, text: str, context: ProofreadContext | None) -> None:
        """Raise :class:`InputError` when the run cannot start."""
        if text is None or not text.strip():
            raise InputError("No text to proofread")
        visible = sum(1 for char in text if not char.isspace())
        minimum = self.configuration.min_text_length
        if visible < minimum:
            raise InputError(
                f"Text is too short to proofread (at least {minimum} characters needed)"
            )
        if context is None:
            raise InputError("A proofreading context (document type and years) is required")
        if not context.project.document_type:
            raise InputError("Document type is required")

    def run_rules_only(self, text: str, context: ProofreadContext) -> ProofreadResult:
        """Run the deterministic checks alone; no network access."""
        try:
            self.validate_input(text, context)
        except InputError as exc:
            LOGGER.error("Rejected input: %s", exc)
            return ProofreadResult.failed(exc)
        rule_errors = self.rule_engine.check(text, context.date_years)
        return ProofreadResult.success(merge(rule_errors, []))

    def run(
        self,
        text: str,
        context: ProofreadContext,
        *,
        cancel_event: threading.Event | None = None,
        timeout: float | None = None,
    ) -> ProofreadResult:
        """Proofread ``text`` with rules and the model.

        ``cancel_event`` abandons the wait for the model when set;
        ``timeout`` bounds the whole wait in seconds. Either ends the run
        with :class:`RunCancelledError`. A later call is a fresh attempt.
        """
        try:
            self.validate_input(text, context)
        except InputError as exc:
            LOGGER.error("Rejected input: %s", exc)
            return ProofreadResult.failed(exc)
        if self.llm is None:
            raise ValueError("Proofreader has no model client; use run_rules_only")
        if cancel_event is not None and cancel_event.is_set():
            return self._failed(RunCancelledError("Run cancelled before it started"))

        prompt = self._prompt_builder(text, context)
        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="proofreader-llm"
        )
        try:
            future = executor.submit(self.llm.generate, prompt)
            rule_errors = self.rule_engine.check(text, context.date_years)
            try:
                response_text = self._await_response(future, cancel_event, timeout)
            except MalformedResponseError as exc:
                return self._degrade(rule_errors, exc)
            except LLMProviderError as exc:
                future.cancel()
                return self._failed(exc)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        summary = self.parser.parse_response(response_text)
        warnings: list[str] = []
        if summary.skipped:
            warnings.append(f"Skipped {summary.skipped} unrecognized line(s) in the model response")
        if not summary.no_errors and not summary.records and not summary.bullet_lines:
            warnings.append("Model response contained no issue lines")
        LOGGER.info(
            "Model reported %d issue(s)%s",
            len(summary.records),
            " (no errors found)" if summary.no_errors else "",
        )

        errors = merge(rule_errors, summary.records)
        LOGGER.info("Proofreading finished with %d issue(s)", len(errors))
        return ProofreadResult.success(
            errors,
            warnings=warnings,
            raw_response=response_text,
            skipped_lines=summary.skipped,
        )

    def _await_response(
        self,
        future: concurrent.futures.Future[str],
        cancel_event: threading.Event | None,
        timeout: float | None,
    ) -> str:
        if cancel_event is None and timeout is None:
            return future.result()

        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise RunCancelledError("Run cancelled by caller")
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                raise RunCancelledError(f"Run timed out after {timeout:g}s")
            wait = _POLL_INTERVAL if remaining is None else min(_POLL_INTERVAL, remaining)
            try:
                return future.result(timeout=wait)
            except concurrent.futures.TimeoutError:
                continue

    def _degrade(
        self, rule_errors: list[ErrorRecord], exc: MalformedResponseError
    ) -> ProofreadResult:
        if not self.configuration.degrade_on_malformed:
            return self._failed(exc)
        reason = exc.args[0] if exc.args else exc.user_message
        LOGGER.warning("Model response unusable (%s); returning rule checks only", reason)
        return ProofreadResult.success(
            merge(rule_errors, []),
            partial=True,
            warnings=[f"{exc.user_message}: {reason}. Showing rule checks only."],
            raw_response=exc.response_text,
        )

    @staticmethod
    def _failed(exc: LLMProviderError) -> ProofreadResult:
        LOGGER.error("Proofreading failed: %s", exc.args[0] if exc.args else exc.user_message)
        return ProofreadResult.failed(exc)
