"""API schemas.

Request/response bodies use camelCase field names on the wire
(`strikeRate`, `fieldingStats`, ...) and snake_case attributes in Python.
Boundary validation lives here: metrics must be finite and non-negative and
the label must be 0 or 1.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


class PerformanceIn(CamelModel):
    """Create/update payload for a performance record; every field is required."""

    average: float = Field(..., ge=0)
    strike_rate: float = Field(..., ge=0)
    bowling_average: float = Field(..., ge=0)
    economy_rate: float = Field(..., ge=0)
    fielding_stats: int = Field(..., ge=0)
    label: int = Field(..., ge=0, le=1)


class PerformanceOut(CamelModel):
    id: int
    average: float
    strike_rate: float
    bowling_average: float
    economy_rate: float
    fielding_stats: int
    label: int


class FilterCriteria(CamelModel):
    """Thresholds for `/filter`; omitted criteria default to 0."""

    min_average: float = 0.0
    min_strike_rate: float = 0.0
    min_fielding: int = 0


class ModelStatus(CamelModel):
    trained: bool
    generation: int
    train_rows: int | None = None
    label_counts: dict[str, int] | None = None
    training_accuracy: float | None = None
    trained_at: datetime | None = None
