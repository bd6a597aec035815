"""Signal and structural data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Signal(str, Enum):
    """Discrete trading event derived from the latest two points."""

    BUY = "buy"
    SELL = "sell"
    NONE = "none"


class TrendState(str, Enum):
    """Binary trend state used by Supertrend."""

    UP = "up"
    DOWN = "down"


class PivotKind(str, Enum):
    """Kind of structural extremum."""

    HIGH = "high"
    LOW = "low"

    @property
    def opposite(self) -> "PivotKind":
        return PivotKind.LOW if self == PivotKind.HIGH else PivotKind.HIGH


class Pivot(BaseModel):
    """A structural extremum at a candle index.

    A provisional pivot (``confirmed=False``) may still be revised as new
    candles arrive; a confirmed one already saw its reversal threshold hit.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    price: float
    kind: PivotKind
    confirmed: bool = True


class LevelKind(str, Enum):
    """Position of a horizontal level relative to the current price."""

    SUPPORT = "support"
    RESISTANCE = "resistance"


class Level(BaseModel):
    """Horizontal price level built from clustered pivots."""

    model_config = ConfigDict(frozen=True)

    price: float
    strength: int  # Number of pivots within tolerance
    kind: LevelKind
    first_index: int
    last_index: int


class FibonacciRetracement(BaseModel):
    """Retracement levels between two alternating pivots."""

    model_config = ConfigDict(frozen=True)

    start: Pivot
    end: Pivot
    levels: dict[float, float]  # ratio -> price

    @property
    def is_uptrend(self) -> bool:
        """True when the swing runs from a low up to a high."""
        return self.end.kind == PivotKind.HIGH


class RangeBands(BaseModel):
    """Fixed-width price bands anchored to a reference price."""

    model_config = ConfigDict(frozen=True)

    reference: float
    width: float
    bands: list[tuple[float, float]]  # (lower, upper), ascending
    current_band: int  # Offset of the latest close from the reference band

    def band_of(self, price: float) -> int:
        """Bucket a price into its band offset (0 = reference band)."""
        if self.width <= 0:
            return 0
        return int((price - self.reference) // self.width)
