"""Numeric entity exposed to the scripting harness.

The entity holds a single-precision float that starts at ``5.0``. A harness
reads or assigns ``value`` directly, calls ``render`` to print it, and relies
on the entity itself to apply increments.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import numpy as np

if TYPE_CHECKING:
    from settings.config import FixtureConfig

logger = logging.getLogger(__name__)

DEFAULT_VALUE = 5.0
FIELD_LABEL = "MyPublicFloatVar"


class NonFiniteValueError(ArithmeticError):
    """Raised when a guarded entity would be left holding inf or nan."""


def _to_single(value: float) -> np.float32:
    with np.errstate(over="ignore", invalid="ignore"):
        return np.float32(value)


class NumericEntity:
    """A stateful single-precision value with increment and render operations.

    With ``reject_non_finite`` set, both increments and direct assignments to
    ``value`` raise ``NonFiniteValueError`` instead of storing inf or nan.
    """

    def __init__(self, *, reject_non_finite: bool = False) -> None:
        self._value = _to_single(DEFAULT_VALUE)
        self._reject_non_finite = reject_non_finite

    @classmethod
    def from_config(cls, config: FixtureConfig) -> NumericEntity:
        return cls(reject_non_finite=config.reject_non_finite)

    @property
    def value(self) -> float:
        return float(self._value)

    @value.setter
    def value(self, new_value: float) -> None:
        self._store(_to_single(new_value), f"assignment of {new_value!r}")

    def render_text(self) -> str:
        """Return the rendered line without writing it."""
        return f"{FIELD_LABEL} = {self.value:.2f}"

    def render(self, stream: TextIO | None = None) -> None:
        """Write the current value to stdout with two decimal places."""
        print(self.render_text(), file=stream if stream is not None else sys.stdout)

    def _increment(self, delta: float) -> None:
        with np.errstate(over="ignore", invalid="ignore"):
            result = self._value + _to_single(delta)
        self._store(result, f"increment by {delta!r}")

    def _store(self, result: np.float32, cause: str) -> None:
        if not np.isfinite(result):
            if self._reject_non_finite:
                msg = f"{cause} would leave {FIELD_LABEL} at {result}"
                raise NonFiniteValueError(msg)
            if np.isfinite(self._value):
                logger.warning("%s became non-finite after %s", FIELD_LABEL, cause)

        logger.debug("%s: %s -> %s", FIELD_LABEL, self._value, result)
        self._value = result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r})"


__all__ = ["DEFAULT_VALUE", "FIELD_LABEL", "NonFiniteValueError", "NumericEntity"]
