import numpy as np
import pandas as pd
import pytest

@pytest.fixture(scope="session")
def rng():
    return np.random.default_rng(12345)

@pytest.fixture
def close_series(rng):
    # Random walk "price" with a sell-off and a rally so smoothing has something to lag
    n = 180
    steps = rng.normal(0, 0.4, size=n)
    steps[20:35] += -1.0
    steps[80:95] += +0.9
    close = 100 + steps.cumsum()
    idx = pd.date_range("2024-01-01", periods=n, freq="min")
    return pd.Series(close, index=idx, name="close")
