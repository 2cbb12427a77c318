"""
Event Classifier - Turns raw hardware components into canonical events.

HID component names differ between vendors and drivers, so matching is
done with substring rules over the lowercased name instead of a
per-device profile. Rules are plain data: supporting a new controller
means adding rows, not branches.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .types import (
    AxisMoved,
    ButtonPressed,
    ButtonReleased,
    CanonicalAxis,
    CanonicalButton,
    CanonicalEvent,
    ClassifierConfig,
    RawComponentSample,
)


@dataclass(frozen=True)
class ClassificationRule:
    """
    One row of a classification table.

    The rule matches when every substring of at least one group in
    ``alternatives`` occurs in the lowercased component name.
    """
    alternatives: Tuple[Tuple[str, ...], ...]
    target: Union[CanonicalButton, CanonicalAxis]

    def matches(self, name: str) -> bool:
        return any(all(token in name for token in group) for group in self.alternatives)


def _rule(target, *alternatives) -> ClassificationRule:
    return ClassificationRule(alternatives=tuple(alternatives), target=target)


# Evaluated top to bottom, first match wins. Digit keys catch drivers that
# only report button indices ("0", "Button 1", ...).
BUTTON_RULES: Tuple[ClassificationRule, ...] = (
    _rule(CanonicalButton.CROSS, ("cross",), ("0",)),
    _rule(CanonicalButton.CIRCLE, ("circle",), ("1",)),
    _rule(CanonicalButton.SQUARE, ("square",), ("2",)),
    _rule(CanonicalButton.TRIANGLE, ("triangle",), ("3",)),
    _rule(CanonicalButton.L1, ("l1",), ("lb",)),
    _rule(CanonicalButton.R1, ("r1",), ("rb",)),
    _rule(CanonicalButton.L2, ("l2",), ("lt",)),
    _rule(CanonicalButton.R2, ("r2",), ("rt",)),
    _rule(CanonicalButton.SHARE, ("share",)),
    _rule(CanonicalButton.OPTIONS, ("options",)),
    _rule(CanonicalButton.L3, ("l3",), ("thumbl",), ("left stick",)),
    _rule(CanonicalButton.R3, ("r3",), ("thumbr",), ("right stick",)),
    _rule(CanonicalButton.TOUCHPAD, ("touchpad",)),
    _rule(CanonicalButton.PS, ("ps button",), ("guide",)),
)

# "z" is tested before "rz", so a bare "rz" name lands on the L2 trigger.
AXIS_RULES: Tuple[ClassificationRule, ...] = (
    _rule(CanonicalAxis.LEFT_STICK_X, ("x", "left")),
    _rule(CanonicalAxis.LEFT_STICK_Y, ("y", "left")),
    _rule(CanonicalAxis.RIGHT_STICK_X, ("x", "right")),
    _rule(CanonicalAxis.RIGHT_STICK_Y, ("y", "right")),
    _rule(CanonicalAxis.L2_TRIGGER, ("z",), ("trigger", "left")),
    _rule(CanonicalAxis.R2_TRIGGER, ("rz",), ("trigger", "right")),
)


class EventClassifier:
    """
    Maps RawComponentSample -> CanonicalEvent.

    Unknown names and undefined digital values are dropped, never raised.
    """

    def __init__(
        self,
        config: Optional[ClassifierConfig] = None,
        button_rules: Sequence[ClassificationRule] = BUTTON_RULES,
        axis_rules: Sequence[ClassificationRule] = AXIS_RULES,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize classifier.

        Args:
            config: Classifier configuration (analog deadzone)
            button_rules: Ordered button table
            axis_rules: Ordered axis table
            logger: Log sink (defaults to the module logger)
        """
        self.config = config or ClassifierConfig()
        self._button_rules = tuple(button_rules)
        self._axis_rules = tuple(axis_rules)
        self._log = logger or logging.getLogger(__name__)

    def classify(self, sample: RawComponentSample) -> Optional[CanonicalEvent]:
        """
        Classify one raw sample.

        Args:
            sample: Component reading from a DeviceSource

        Returns:
            ButtonPressed, ButtonReleased or AxisMoved, or None if the
            sample cannot be classified
        """
        name = sample.name.lower()

        if sample.is_analog:
            return self._classify_axis(name, sample.value)
        return self._classify_button(name, sample.value)

    def _classify_button(self, name: str, value: float) -> Optional[CanonicalEvent]:
        if value == 1.0:
            event_type = ButtonPressed
        elif value == 0.0:
            event_type = ButtonReleased
        else:
            self._log.debug(f"Ignoring digital component '{name}' with value {value}")
            return None

        button = self._match(self._button_rules, name)
        if button is None:
            self._log.debug(f"Unmapped button '{name}'")
            return None
        return event_type(button)

    def _classify_axis(self, name: str, value: float) -> Optional[CanonicalEvent]:
        value = self.apply_deadzone(value)

        axis = self._match(self._axis_rules, name)
        if axis is None:
            self._log.debug(f"Unmapped axis '{name}'")
            return None
        return AxisMoved(axis, value)

    def apply_deadzone(self, value: float) -> float:
        """Coerce readings inside the deadzone to exactly 0.0"""
        if abs(value) < self.config.deadzone:
            return 0.0
        return float(value)

    @staticmethod
    def _match(rules: Sequence[ClassificationRule], name: str):
        for rule in rules:
            if rule.matches(name):
                return rule.target
        return None
