"""Simple moving averages used to seed Wilder smoothing."""

from __future__ import annotations

from collections import deque
from decimal import Decimal
from typing import Any, Callable, Deque, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


def to_decimal(value: Any) -> Decimal:
    """Coerce a price to ``Decimal``; floats go through ``str`` to keep ``0.1`` as ``0.1``."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class RollingMean(Generic[T]):
    """Mean of the last ``interval`` values, ``None`` until the window is full."""

    def __init__(self, interval: int, coerce: Callable[[Any], T], zero: T) -> None:
        self.interval = interval
        self._coerce = coerce
        self._zero = zero
        self._window: Deque[T] = deque(maxlen=interval)

    def update(self, price: Any) -> Optional[T]:
        self._window.append(self._coerce(price))
        if len(self._window) < self.interval:
            return None
        return sum(self._window, self._zero) / self.interval

    def updates(self, prices: Iterable[Any]) -> Optional[T]:
        result = None
        for price in prices:
            result = self.update(price)
        return result


class SMA(RollingMean[Decimal]):
    """Decimal SMA."""

    def __init__(self, interval: int) -> None:
        super().__init__(interval, to_decimal, Decimal(0))


class FasterSMA(RollingMean[float]):
    """Float SMA."""

    def __init__(self, interval: int) -> None:
        super().__init__(interval, float, 0.0)
