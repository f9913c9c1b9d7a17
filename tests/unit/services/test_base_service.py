from __future__ import annotations

import pytest

from dashboard.services.base_service import BaseService
from dashboard.services.invoice_service import InvoiceService


class _FailingSession:
    def __init__(self) -> None:
        self.rolled_back = False

    def commit(self) -> None:
        raise RuntimeError("commit failed")

    def rollback(self) -> None:
        self.rolled_back = True


def test_service_uses_the_callers_session(db_session):
    assert InvoiceService(db=db_session).db is db_session


def test_commit_failure_rolls_back_and_propagates():
    session = _FailingSession()
    with pytest.raises(RuntimeError, match="commit failed"):
        BaseService(session).commit()
    assert session.rolled_back
