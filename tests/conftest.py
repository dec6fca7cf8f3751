from datetime import datetime, timedelta

import pytest


class FakeClock:
    def __init__(self, start: datetime = datetime(2025, 1, 6, 9, 0)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()
