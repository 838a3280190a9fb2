"""Wilder's Smoothed Moving Average (WSMA).

Developed by J. Welles Wilder, Jr. Similar to an exponential moving average but
with a smoothing factor of ``1/interval``, which makes it react more slowly to
price changes. Also known as SMMA, MEMA or Wilder's Moving Average.

The average is seeded with the SMA of the first ``interval`` prices and from then
on updated recursively::

    result = (price - result) * (1 / interval) + result
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from .sma import SMA, FasterSMA, RollingMean, to_decimal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotEnoughDataError(Exception):
    """Raised when a result is requested before the seed window is complete."""


@dataclass(frozen=True)
class Arithmetic(Generic[T]):
    """Numeric capability the recurrence is computed with."""

    coerce: Callable[[Any], T]
    zero: T


DECIMAL = Arithmetic(coerce=to_decimal, zero=Decimal(0))
FLOAT = Arithmetic(coerce=float, zero=0.0)


class ResultHolder(Generic[T]):
    """Current result of an indicator plus the extremes it has reached."""

    def __init__(self) -> None:
        self.value: Optional[T] = None
        self.highest: Optional[T] = None
        self.lowest: Optional[T] = None

    def set(self, value: T) -> T:
        # NaN has no order (Decimal NaN raises on ``<``), so it never becomes an extreme
        if value == value:
            if self.highest is None or value > self.highest:
                self.highest = value
            if self.lowest is None or value < self.lowest:
                self.lowest = value
        self.value = value
        return value


class WSMAEngine(Generic[T]):
    """Seed/recurrence state machine shared by both precision modes.

    The engine is ``Seeding`` until its SMA produces the first mean and
    ``Smoothing`` afterwards. The SMA keeps being fed while smoothing so its
    window stays current, but its output is ignored.

    ``interval`` is not validated: it must be a positive integer.
    """

    def __init__(self, interval: int, arithmetic: Arithmetic[T], indicator: RollingMean[T]) -> None:
        self.interval = interval
        self._arithmetic = arithmetic
        self._indicator = indicator
        self._result: ResultHolder[T] = ResultHolder()
        self.smoothing_factor: T = arithmetic.coerce(1) / interval

    @property
    def result(self) -> Optional[T]:
        return self._result.value

    @property
    def is_stable(self) -> bool:
        return self._result.value is not None

    @property
    def highest(self) -> Optional[T]:
        return self._result.highest

    @property
    def lowest(self) -> Optional[T]:
        return self._result.lowest

    def get_result(self) -> T:
        if self._result.value is None:
            raise NotEnoughDataError(
                f"{type(self).__name__}({self.interval}) needs {self.interval} prices before it has a result"
            )
        return self._result.value

    def _step(self, price: T, result: Optional[T], sma: Optional[T]) -> Optional[T]:
        if result is not None:
            return (price - result) * self.smoothing_factor + result
        return sma

    def update(self, price: Any) -> Optional[T]:
        price = self._arithmetic.coerce(price)
        sma = self._indicator.update(price)
        current = self._result.value
        if current is None and sma is None:
            return None
        if current is None:
            logger.debug("%s(%d) seeded with %s", type(self).__name__, self.interval, sma)
        return self._result.set(self._step(price, current, sma))

    def updates(self, prices: Iterable[Any]) -> Optional[T]:
        for price in prices:
            self.update(price)
        return self._result.value

    def get_result_from_batch(self, prices: Iterable[Any]) -> T:
        """Run ``prices`` through the recurrence without touching ``result``.

        Returns the zero value if the batch never completes the seed window.
        The prices are still fed to this engine's own SMA, so its window moves:
        calling this mid-stream, or twice, changes what later updates seed from.
        """
        result: Optional[T] = None
        for price in prices:
            price = self._arithmetic.coerce(price)
            sma = self._indicator.update(price)
            result = self._step(price, result, sma)
        return result if result is not None else self._arithmetic.zero


class WSMA(WSMAEngine[Decimal]):
    """WSMA in arbitrary-precision ``Decimal`` arithmetic.

    Precision and rounding follow the active :mod:`decimal` context.
    """

    def __init__(self, interval: int) -> None:
        super().__init__(interval, DECIMAL, SMA(interval))


class FasterWSMA(WSMAEngine[float]):
    """WSMA in native ``float`` arithmetic."""

    def __init__(self, interval: int) -> None:
        super().__init__(interval, FLOAT, FasterSMA(interval))
