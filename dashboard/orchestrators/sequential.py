"""
Sequential orchestration as an explicit state machine.

    IDLE -> FETCHING(stage 0) -> FETCHING(stage 1) -> ... -> DONE
                  \\________________\\____________________-> ABORTED

Each stage is dispatched only after the previous stage's outcome has been
fully rendered. A failing stage renders its error and aborts every later
stage, unless the stage is optional: an optional stage renders its own
error and the run carries on.

Suspension is delegated to `dispatch(request, callback)`, so the same
machine runs over thread-pool callbacks or a synchronous test double.
"""
import logging
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from dashboard.schemas import FetchFailure, FetchOutcome, FetchRequest
from dashboard.views.dashboard import display_error

logger = logging.getLogger(__name__)

Dispatch = Callable[[FetchRequest, Callable[[FetchOutcome], None]], None]
ErrorRenderer = Callable[[str, FetchFailure], None]

class SequentialState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    DONE = "done"
    ABORTED = "aborted"

@dataclass(frozen=True)
class Stage:
    name: str  # also the error context shown to the user
    request: FetchRequest
    on_success: Callable[[Any], None]
    optional: bool = False

@dataclass
class SequentialResult:
    state: SequentialState
    completed: List[str] = field(default_factory=list)
    failed_stage: Optional[str] = None
    failure: Optional[FetchFailure] = None

class SequentialOrchestrator:
    def __init__(self, stages: Sequence[Stage], dispatch: Dispatch, on_error: ErrorRenderer = display_error):
        self._stages = list(stages)
        self._dispatch = dispatch
        self._on_error = on_error
        self._on_finished: Optional[Callable[[SequentialResult], None]] = None
        self._completed: List[str] = []
        self.state = SequentialState.IDLE
        self.current_stage: Optional[int] = None
        self.result: Optional[SequentialResult] = None

    def start(self, on_finished: Optional[Callable[[SequentialResult], None]] = None) -> None:
        """Kick off stage 0. `on_finished` fires once, on DONE or ABORTED."""
        if self.state is not SequentialState.IDLE:
            raise RuntimeError(f"orchestrator already {self.state.value}")
        self._on_finished = on_finished
        self._run_stage(0)

    def run(self) -> "Future[SequentialResult]":
        """Start the machine and return a future settled with the terminal result."""
        future: "Future[SequentialResult]" = Future()
        future.set_running_or_notify_cancel()
        self.start(on_finished=future.set_result)
        return future

    def _run_stage(self, index: int) -> None:
        if index >= len(self._stages):
            self._finish(SequentialResult(state=SequentialState.DONE, completed=list(self._completed)))
            return

        stage = self._stages[index]
        self.state = SequentialState.FETCHING
        self.current_stage = index
        logger.debug("stage %d (%s): fetching %s", index, stage.name, stage.request.url)
        self._dispatch(stage.request, lambda outcome: self._on_outcome(index, outcome))

    def _on_outcome(self, index: int, outcome: FetchOutcome) -> None:
        stage = self._stages[index]

        if outcome.ok:
            stage.on_success(outcome.payload)
            self._completed.append(stage.name)
            self._run_stage(index + 1)
            return

        self._on_error(stage.name, outcome)
        if stage.optional:
            logger.debug("optional stage %d (%s) failed, continuing", index, stage.name)
            self._run_stage(index + 1)
            return

        logger.debug("stage %d (%s) failed, aborting", index, stage.name)
        self._finish(SequentialResult(
            state=SequentialState.ABORTED,
            completed=list(self._completed),
            failed_stage=stage.name,
            failure=outcome,
        ))

    def _finish(self, result: SequentialResult) -> None:
        self.state = result.state
        self.current_stage = None
        self.result = result
        logger.debug("sequential run finished: %s", result.state.value)
        if self._on_finished is not None:
            self._on_finished(result)
