from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .system import System

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single idempotent setup step."""

    step_id: str
    name: str

    def is_present(self, system: System) -> bool:
        ...

    def install(self, system: System) -> None:
        ...

    def satisfied_message(self, system: System) -> str:
        ...


class StepFailedError(RuntimeError):
    """A step's check or install action failed; the run stops here."""

    def __init__(self, step_id: str, step_name: str, cause: BaseException):
        self.step_id = step_id
        self.step_name = step_name
        super().__init__(f"{step_name} failed: {cause}")


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    skipped_steps: List[str] = field(default_factory=list)


def run_pipeline(
    *,
    steps: Sequence[Step],
    system: System,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order, skipping the ones already satisfied.

    The first failure aborts the whole run with StepFailedError. Nothing is
    retried or undone.
    """

    known = {s.step_id for s in steps}
    if start_at is not None and start_at not in known:
        raise ValueError(f"Unknown step id for start_at: {start_at}")
    if stop_after is not None and stop_after not in known:
        raise ValueError(f"Unknown step id for stop_after: {stop_after}")

    ran: List[str] = []
    skipped: List[str] = []

    started = start_at is None

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        try:
            present = step.is_present(system)
            if present:
                logger.info("✅ %s", step.satisfied_message(system))
                skipped.append(step.step_id)
            else:
                logger.info("📦 %s...", step.name)
                step.install(system)
                ran.append(step.step_id)
        except Exception as e:
            logger.debug("Step %s raised", step.step_id, exc_info=True)
            raise StepFailedError(step.step_id, step.name, e) from e

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    return PipelineResult(ran_steps=ran, skipped_steps=skipped)
