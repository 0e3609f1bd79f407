"""
chart.py: The candlestick trail left behind the player. Cosmetic only.
"""

from typing import List

from .constants import (
    SCREEN_HEIGHT, CANDLE_WIDTH, MAX_CANDLES, CANDLE_BUFFER, VERTICAL_FILL_FACTOR
)
from .data_models import Candle


class ChartTrail:
    def __init__(self, canvas_height: float = SCREEN_HEIGHT,
                 candle_width: float = CANDLE_WIDTH,
                 max_candles: int = MAX_CANDLES):
        self.canvas_height = canvas_height
        self.candle_width = candle_width
        self.max_candles = max_candles
        self.candles: List[Candle] = []
        self.last_y = canvas_height / 2

    def reset(self):
        self.candles = []
        self.last_y = self.canvas_height / 2

    def _bound(self, y: float) -> float:
        return max(0.0, min(y, self.canvas_height))

    def update(self, world_x: float, player_y: float) -> bool:
        """Adds a candle once the world has moved a candle width. Returns True if one was added."""
        if self.candles and world_x - self.candles[-1].x < self.candle_width:
            return False

        close = self._bound(player_y)
        open_ = self._bound(self.last_y)
        pad = CANDLE_BUFFER * VERTICAL_FILL_FACTOR

        self.candles.append(Candle(
            x=world_x,
            open=open_,
            close=close,
            high=max(0.0, min(open_, close) - pad),
            low=min(self.canvas_height, max(open_, close) + pad),
        ))
        self.last_y = close

        if len(self.candles) > self.max_candles:
            self.candles.pop(0)
        return True

    def screen_x(self, candle: Candle, world_x: float, player_x: float) -> float:
        """Where a candle sits on screen; the newest one is under the player."""
        return player_x - self.candle_width / 2 - (world_x - candle.x)
