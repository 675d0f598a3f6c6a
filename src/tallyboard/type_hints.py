"""Type hints used in Tally Board."""

from typing import Dict, Literal

# Counter kind literals (for type hints)
CounterKind = Literal["goals", "misses", "finals", "slaps"]

# Ranking mode literals
RankingMode = Literal["session", "live"]

# Player id -> awarded session points
PointsMap = Dict[str, int]
