"""A first-order lag (PT1) model that is stepped at a fixed period."""

from __future__ import annotations

import math
import sys
from decimal import Decimal

PERIOD = 0.050
"""Model period in seconds."""


def _format_float(value: float) -> str:
    """Shortest round-trip text of ``value``, without exponent or trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Model:
    """PT1 element: ``T * x' + x = K * u`` with output ``y = x``.

    ``k`` is the amplification factor and ``t`` the time constant in seconds.
    A time constant of zero is replaced by the machine epsilon.
    """

    def __init__(self, k: float, t: float) -> None:
        self.k = k
        self.t = sys.float_info.epsilon if t == 0.0 else t
        self.x = 0.0
        self.u = 1.0
        self.y = 0.0
        self.cycle = 0

    def update(self) -> None:
        """Advance the model by one period and print the cycle and output."""
        self.y = self.x
        x_dot = (self.k * self.u - self.x) / self.t
        self.x += x_dot * PERIOD
        self.cycle += 1
        print(f"{self.cycle:03}, {_format_float(self.y)}")

    def __repr__(self) -> str:
        return (
            f"Model(k={self.k!r}, t={self.t!r}, x={self.x!r}, "
            f"u={self.u!r}, y={self.y!r}, cycle={self.cycle})"
        )