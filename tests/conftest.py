"""Shared test fixtures"""

import pytest


class RecordingActuator:
    """Actuator that records every call in order"""

    def __init__(self) -> None:
        self.calls = []
        self.left = 0.0
        self.right = 0.0

    def move(self, left: float, right: float) -> None:
        self.calls.append(("move", left, right))
        self.left, self.right = left, right

    def rotate(self, angular: float) -> None:
        self.calls.append(("rotate", angular))
        self.left, self.right = -angular, angular

    def stop(self) -> None:
        self.calls.append(("stop",))
        self.left, self.right = 0.0, 0.0

    def perform_action(self, name: str) -> None:
        self.calls.append(("action", name))

    @property
    def is_connected(self) -> bool:
        return True

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)


@pytest.fixture
def recorder():
    """Create a recording actuator"""
    return RecordingActuator()
