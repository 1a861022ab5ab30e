"""Convert decoded candles to a pandas OHLCV frame."""

from __future__ import annotations

import numpy as np
import pandas as pd

from wallex.models import Candle

COLUMNS = ["timestamp", "open", "high", "low", "close", "volume"]


def _value(n) -> float:
    return np.nan if n.is_absent() else n.as_float()


def candles_to_frame(candles: list[Candle]) -> pd.DataFrame:
    rows = [
        [c.timestamp, _value(c.open), _value(c.high), _value(c.low), _value(c.close), _value(c.volume)]
        for c in candles
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    return df
