"""
Shared fixtures for PHP Blueprint tests.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from php_blueprint.core.errors import PersistenceWriteError
from php_blueprint.models.generation import GenerationRequest
from php_blueprint.storage.record_store import InMemoryRecordStore


class FakeGenerator:
    """PlanGenerator double that records requests and returns canned text."""

    def __init__(self, plan: str = "# Plan\n\nDo the thing.", error: Optional[Exception] = None):
        self.plan = plan
        self.error = error
        self.requests: List[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.plan


class FailingWriteStore(InMemoryRecordStore):
    """Record store whose writes always fail (quota exceeded, disabled storage)."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.write_attempts = 0

    def write(self, key: str, text: str) -> None:
        self.write_attempts += 1
        raise PersistenceWriteError(key, "quota exceeded")


class StepClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: Optional[datetime] = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def clock():
    return StepClock()
