"""Configuration classes for the scheduling system."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlgorithmType(str, Enum):
    """Available scheduling algorithms."""

    TOPOLOGICAL = "topological"
    PRIORITY_SELECTION = "priority_selection"
    GREEDY = "greedy"
    SHORTEST_DURATION = "shortest_duration"

    @classmethod
    def parse(cls, value: "AlgorithmType | str") -> "AlgorithmType":
        """Resolve an algorithm selector, accepting legacy and dashed names.

        Raises:
            ValueError: If the selector names no known algorithm
        """
        if isinstance(value, AlgorithmType):
            return value
        normalized = value.strip().lower().replace("-", "_")
        normalized = _ALGORITHM_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown algorithm '{value}'. Valid values: {valid}") from None


_ALGORITHM_ALIASES = {
    "dp": AlgorithmType.PRIORITY_SELECTION.value,
    "heap": AlgorithmType.SHORTEST_DURATION.value,
    "kahn": AlgorithmType.TOPOLOGICAL.value,
}

# Run order for comparisons
ALL_ALGORITHMS: tuple[AlgorithmType, ...] = (
    AlgorithmType.TOPOLOGICAL,
    AlgorithmType.PRIORITY_SELECTION,
    AlgorithmType.GREEDY,
    AlgorithmType.SHORTEST_DURATION,
)


class OrderingMode(str, Enum):
    """How re-ordering algorithms treat the topological seed order."""

    RESORT = "resort"  # Re-sort the whole seed order; dependency order is not kept
    LEVELED = "leveled"  # Re-sort within each topological level; dependency order is kept


class RankingConfig(BaseModel):
    """Weights for the composite comparison score."""

    model_config = ConfigDict(extra="forbid")

    success_weight: float = Field(default=0.6, ge=0.0)
    speed_weight: float = Field(default=0.4, ge=0.0)


class SchedulingConfig(BaseModel):
    """Configuration for algorithm selection, ordering and ranking."""

    model_config = ConfigDict(extra="forbid")

    algorithm: AlgorithmType = AlgorithmType.TOPOLOGICAL
    ordering: OrderingMode = OrderingMode.RESORT
    ranking: RankingConfig = RankingConfig()

    @field_validator("algorithm", mode="before")
    @classmethod
    def parse_algorithm(cls, v: Any) -> Any:
        """Accept legacy names (dp, heap) and dashed spellings."""
        if isinstance(v, str):
            return AlgorithmType.parse(v)
        return v
