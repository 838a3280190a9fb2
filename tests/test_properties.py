import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from wilder_smoothing import WSMA, FasterWSMA

prices_strategy = st.lists(
    st.floats(min_value=1.0, max_value=1000.0, allow_nan=False, allow_infinity=False),
    min_size=1, max_size=80,
)


@given(interval=st.integers(min_value=1, max_value=20), prices=prices_strategy)
@settings(deadline=None, max_examples=50)
def test_seed_arrives_on_interval_th_price(interval, prices):
    wsma = FasterWSMA(interval)
    outputs = [wsma.update(p) for p in prices]
    assert all(o is None for o in outputs[: interval - 1])
    if len(prices) >= interval:
        assert outputs[interval - 1] == pytest.approx(sum(prices[:interval]) / interval)
        assert all(o is not None for o in outputs[interval - 1:])


@given(interval=st.integers(min_value=1, max_value=20), prices=prices_strategy)
@settings(deadline=None, max_examples=50)
def test_recurrence_after_seed(interval, prices):
    wsma = WSMA(interval)
    outputs = [wsma.update(p) for p in prices]
    for k in range(interval, len(prices)):
        prev = outputs[k - 1]
        price = WSMA(1).update(prices[k])
        assert outputs[k] == (price - prev) * wsma.smoothing_factor + prev


@given(interval=st.integers(min_value=1, max_value=20), prices=prices_strategy)
@settings(deadline=None, max_examples=50)
def test_updates_equals_repeated_update(interval, prices):
    for cls in (WSMA, FasterWSMA):
        streamed = cls(interval)
        for p in prices:
            streamed.update(p)
        assert cls(interval).updates(prices) == streamed.result
