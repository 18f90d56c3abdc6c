"""Value normalization onto the unit interval for color mapping."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Iterable, Optional

import numpy as np


def _linear(value: float) -> float:
    return float(value)


def _ufunc(fn: Callable) -> Callable[[float], float]:
    def scale(value: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(fn(value))
    return scale


_log10 = _ufunc(np.log10)
_log2 = _ufunc(np.log2)
_ln = _ufunc(np.log)


class Norm:
    """Maps values through a scale function, then linearly onto [0, 1]."""

    def __init__(self, scale: Callable[[float], float] = _linear) -> None:
        self._scale = scale
        self._vmin: Optional[float] = None
        self._vmax: Optional[float] = None
        self._min = -1.0
        self._max = 1.0

    @classmethod
    def from_norms(cls, kind: "Norms") -> "Norm":
        return cls(kind.scale_function)

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    def set_bounds(self, values: Iterable[float]) -> None:
        """Set the range from the scaled values, honouring fixed vmin/vmax."""
        lo, hi = sys.float_info.max, -sys.float_info.max
        for value in np.ravel(np.asarray(values, dtype=float)):
            scaled = self._scale(float(value))
            if scaled < lo:
                lo = scaled
            if scaled > hi:
                hi = scaled

        if lo == hi:
            lo -= 1.0
            hi += 1.0

        self._min = lo if self._vmin is None else self._vmin
        self._max = hi if self._vmax is None else self._vmax

    def vmin(self, value: float) -> "Norm":
        self._vmin = float(value)
        return self

    def vmax(self, value: float) -> "Norm":
        self._vmax = float(value)
        return self

    def norm(self, value: float) -> float:
        scaled = self._scale(value)
        return (scaled - self._min) / (self._max - self._min)

    def __call__(self, value: float) -> float:
        return self.norm(value)


class Norms(Enum):
    """Built-in normalization scales."""

    LINEAR = "linear"
    LOG10 = "log10"
    LOG2 = "log2"
    LN = "ln"

    @property
    def scale_function(self) -> Callable[[float], float]:
        return {
            Norms.LINEAR: _linear,
            Norms.LOG10: _log10,
            Norms.LOG2: _log2,
            Norms.LN: _ln,
        }[self]

    def vmin(self, value: float) -> Norm:
        return Norm.from_norms(self).vmin(value)

    def vmax(self, value: float) -> Norm:
        return Norm.from_norms(self).vmax(value)


__all__ = ["Norm", "Norms"]