"""State tracking for a single form submission."""

from __future__ import annotations

import logging

from dashboard.core.enums import SubmissionStage

logger = logging.getLogger(__name__)

SUBMISSION_TRANSITIONS: dict[SubmissionStage, set[SubmissionStage]] = {
    SubmissionStage.IDLE: {SubmissionStage.VALIDATING, SubmissionStage.PERSISTING},
    SubmissionStage.VALIDATING: {SubmissionStage.INVALID, SubmissionStage.PERSISTING},
    SubmissionStage.PERSISTING: {SubmissionStage.FAILED, SubmissionStage.SUCCEEDED},
    SubmissionStage.SUCCEEDED: {SubmissionStage.INVALIDATED},
    SubmissionStage.INVALIDATED: {SubmissionStage.REDIRECTED},
}

TERMINAL_STAGES = frozenset(
    {SubmissionStage.INVALID, SubmissionStage.FAILED, SubmissionStage.REDIRECTED}
)


class InvalidTransitionError(ValueError):
    """Raised when a disallowed state transition is attempted."""


class StateMachine:
    def __init__(self, transitions: dict[SubmissionStage, set[SubmissionStage]]) -> None:
        self._transitions = transitions

    def can_transition(self, current: SubmissionStage, target: SubmissionStage) -> bool:
        return target in self._transitions.get(current, set())

    def assert_transition(self, current: SubmissionStage, target: SubmissionStage) -> None:
        if not self.can_transition(current=current, target=target):
            raise InvalidTransitionError(f"Transition not allowed: {current.value} -> {target.value}")


submission_machine = StateMachine(SUBMISSION_TRANSITIONS)


class Submission:
    """Walks one action invocation through its stages.

    Delete skips validation (Idle -> Persisting) and ends at Invalidated.
    """

    def __init__(self, action: str) -> None:
        self.action = action
        self.stage = SubmissionStage.IDLE
        self.history: list[SubmissionStage] = [self.stage]

    def advance(self, target: SubmissionStage) -> None:
        submission_machine.assert_transition(self.stage, target)
        logger.debug(
            "submission.transition",
            extra={
                "event": "submission.transition",
                "action": self.action,
                "from_stage": self.stage.value,
                "to_stage": target.value,
            },
        )
        self.stage = target
        self.history.append(target)

    @property
    def is_terminal(self) -> bool:
        return self.stage in TERMINAL_STAGES
