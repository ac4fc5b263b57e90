"""
PHP Blueprint Generation Orchestrator

Runs one request/response cycle:

    IDLE → GENERATING → SUCCEEDED
                   ↓
                 FAILED

Re-entering GENERATING (from any state) first clears the previous plan,
error and debug snapshot. Only one generation may be outstanding at a time;
a second call while one is in flight is rejected, so history appends never
interleave.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from php_blueprint.core.errors import GENERATION_FAILED_MESSAGE, GenerationInProgressError
from php_blueprint.core.logger import dev_log, log_timing
from php_blueprint.models.generation import DebugSnapshot, GenerationRecord, GenerationRequest
from php_blueprint.models.spec import ProjectSpec
from php_blueprint.prompts.plan_prompt import CompiledPrompt, compile_prompt
from php_blueprint.services.gemini_client import PlanGenerator
from php_blueprint.services.history_ledger import HistoryLedger

logger = logging.getLogger("blueprint.generation")


class GenerationState(str, Enum):
    """States of a generation cycle."""
    IDLE = "IDLE"
    GENERATING = "GENERATING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class GenerationOutcome:
    """Result of one generate() call."""
    state: GenerationState
    plan: Optional[str] = None
    error: Optional[str] = None
    record: Optional[GenerationRecord] = None
    debug: Optional[DebugSnapshot] = None

    @property
    def succeeded(self) -> bool:
        return self.state == GenerationState.SUCCEEDED


class GenerationOrchestrator:
    """
    Coordinates PromptCompiler → PlanGenerator → HistoryLedger.

    Usage:
        orchestrator = GenerationOrchestrator(GeminiPlanClient(), ledger)
        outcome = await orchestrator.generate(store.snapshot())
        if outcome.succeeded:
            render(outcome.plan)
    """

    def __init__(
        self,
        generator: PlanGenerator,
        ledger: HistoryLedger,
        compiler: Callable[[ProjectSpec], CompiledPrompt] = compile_prompt,
    ):
        self._generator = generator
        self._ledger = ledger
        self._compiler = compiler
        self._lock = asyncio.Lock()

        self.state = GenerationState.IDLE
        self.plan: Optional[str] = None
        self.error: Optional[str] = None
        self.debug: Optional[DebugSnapshot] = None

    @property
    def is_generating(self) -> bool:
        return self.state == GenerationState.GENERATING

    def _clear(self) -> None:
        self.plan = None
        self.error = None
        self.debug = None

    def reset(self) -> None:
        """Back to IDLE with nothing shown."""
        if self.is_generating:
            raise GenerationInProgressError()
        self._clear()
        self.state = GenerationState.IDLE

    def show_history_item(self, record: GenerationRecord) -> None:
        """Display a past plan. There is no debug snapshot for it."""
        if self.is_generating:
            raise GenerationInProgressError()
        self._clear()
        self.plan = record.plan
        self.state = GenerationState.IDLE

    @log_timing(logger)
    async def generate(self, spec: ProjectSpec) -> GenerationOutcome:
        """
        Generate a plan for a spec snapshot.

        Failures never raise (compiler, collaborator or ledger): they end in
        FAILED with a generic user-facing message, no debug snapshot and no
        history entry. Cancellation returns to IDLE and propagates.

        Raises:
            GenerationInProgressError: another generation is outstanding
        """
        if self._lock.locked():
            raise GenerationInProgressError()

        async with self._lock:
            snapshot = spec.model_copy(deep=True)
            self._clear()
            self.state = GenerationState.GENERATING

            try:
                compiled = self._compiler(snapshot)
                request = GenerationRequest(
                    model=snapshot.model,
                    prompt=compiled.prompt_text,
                    config=compiled.model_config,
                )
                dev_log(logger, "[GENERATION] Full prompt:\n%s", compiled.prompt_text)

                plan = await self._generator.generate(request)
                if not isinstance(plan, str) or not plan.strip():
                    raise ValueError("Generator returned no plan text")

                debug = DebugSnapshot(
                    prompt=compiled.prompt_text,
                    config={"model": snapshot.model, **compiled.model_config},
                    raw_response=plan,
                )
                record = self._ledger.append(snapshot, plan)
            except asyncio.CancelledError:
                logger.warning("[GENERATION] Plan generation cancelled")
                self._clear()
                self.state = GenerationState.IDLE
                raise
            except Exception as e:
                logger.error(f"[GENERATION] ❌ Plan generation failed: {e}", exc_info=True)
                self._clear()
                self.error = GENERATION_FAILED_MESSAGE
                self.state = GenerationState.FAILED
                return GenerationOutcome(state=self.state, error=self.error)

            self.plan = plan
            self.debug = debug
            self.state = GenerationState.SUCCEEDED
            logger.info(f"[GENERATION] ✅ Plan generated for '{snapshot.project_name}' ({len(plan)} chars)")

            return GenerationOutcome(
                state=self.state,
                plan=plan,
                record=record,
                debug=self.debug,
            )
