from .core import WSMA, FasterWSMA, NotEnoughDataError
from .sma import SMA, FasterSMA
from .utils import wilder_rsi, wsma_series

__all__ = ["WSMA", "FasterWSMA", "NotEnoughDataError", "SMA", "FasterSMA", "wilder_rsi", "wsma_series"]
