from __future__ import annotations

import pytest

from dashboard.actions.lifecycle import InvalidTransitionError, Submission
from dashboard.core.enums import SubmissionStage
from dashboard.navigation import redirect


def test_successful_submission_path():
    submission = Submission("create_invoice")
    for stage in (
        SubmissionStage.VALIDATING,
        SubmissionStage.PERSISTING,
        SubmissionStage.SUCCEEDED,
        SubmissionStage.INVALIDATED,
        SubmissionStage.REDIRECTED,
    ):
        submission.advance(stage)
    assert submission.is_terminal is True
    assert submission.history[0] is SubmissionStage.IDLE


def test_invalid_is_terminal():
    submission = Submission("create_invoice")
    submission.advance(SubmissionStage.VALIDATING)
    submission.advance(SubmissionStage.INVALID)
    assert submission.is_terminal is True
    with pytest.raises(InvalidTransitionError):
        submission.advance(SubmissionStage.PERSISTING)


def test_cannot_redirect_before_invalidating():
    submission = Submission("update_invoice")
    submission.advance(SubmissionStage.VALIDATING)
    submission.advance(SubmissionStage.PERSISTING)
    submission.advance(SubmissionStage.SUCCEEDED)
    with pytest.raises(InvalidTransitionError):
        submission.advance(SubmissionStage.REDIRECTED)


def test_redirect_requires_absolute_path():
    assert redirect("/dashboard/invoices").status_code == 303
    with pytest.raises(ValueError):
        redirect("dashboard/invoices")
