"""Vectorised helpers built on the streaming WSMA engines."""
from __future__ import annotations

import numpy as np
import pandas as pd

from .core import FasterWSMA


def wsma_series(prices: pd.Series, interval: int = 14) -> pd.Series:
    """Wilder's smoothed moving average of a price series.

    Parameters
    ----------
    prices : pd.Series
        Prices ordered by a monotonic increasing index.
    interval : int
        Seed window length; the smoothing factor is ``1/interval``.

    Returns
    -------
    pd.Series
        Same index as ``prices``; NaN for the first ``interval - 1`` rows.
    """
    if interval < 1:
        raise ValueError("interval must be >= 1")
    if prices.empty:
        raise ValueError("prices must not be empty")
    if not prices.index.is_monotonic_increasing:
        raise ValueError("prices index must be monotonic increasing")

    wsma = FasterWSMA(interval)
    values = [wsma.update(p) for p in prices.to_numpy(dtype=float)]
    out = pd.Series(values, index=prices.index, dtype="float64")
    out.name = f"wsma_{interval}"
    return out


def wilder_rsi(prices: np.ndarray, period: int = 14) -> np.ndarray:
    """Calculate RSI with average gain/loss smoothed by WSMA.

    Returns
    -------
    np.ndarray
        RSI values (0..100). NaN until index ``period``, the first bar with a
        full window of deltas.
    """
    prices = np.asarray(prices, dtype=float)
    if prices.ndim != 1 or prices.size < period + 1:
        raise ValueError("prices must be 1D and length >= period+1")

    gains = FasterWSMA(period)
    losses = FasterWSMA(period)
    rsi = np.full_like(prices, np.nan, dtype=float)

    for i, delta in enumerate(np.diff(prices), start=1):
        up = gains.update(max(delta, 0.0))
        down = losses.update(max(-delta, 0.0))
        if up is None or down is None:
            continue
        if down == 0.0:
            # flat window reads as neutral, pure gains as overbought
            rsi[i] = 50.0 if up == 0.0 else 100.0
        else:
            rsi[i] = 100.0 - 100.0 / (1.0 + up / down)

    return rsi
