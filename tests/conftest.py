import pytest

from typing import Any, Iterator

import time


@pytest.fixture
def utc(monkeypatch: Any) -> Iterator[None]:
    """Run the test with the local timezone set to UTC."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    try:
        yield
    finally:
        monkeypatch.undo()
        time.tzset()
