"""Typed filter criteria for the dimension and weight queries."""
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from fleet.utils.exceptions import InvalidQueryError


def _bound(params: Mapping[str, Any], name: str) -> float | None:
    value = params.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidQueryError(f"invalid query: {name} must be a number")
    return float(value)


class DimensionQuery(BaseModel):
    """Inclusive bounds for ``find_query``.

    Either no bound is given (no filtering) or all four are.
    """

    min_length: float | None = None
    max_length: float | None = None
    min_width: float | None = None
    max_width: float | None = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "DimensionQuery":
        return cls(**{name: _bound(params, name) for name in cls.model_fields})

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())

    def missing(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if value is None]


class WeightQuery(BaseModel):
    """Inclusive bounds for ``filter_by_weight``."""

    weight_min: float | None = None
    weight_max: float | None = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "WeightQuery":
        return cls(**{name: _bound(params, name) for name in cls.model_fields})

    def is_empty(self) -> bool:
        return self.weight_min is None and self.weight_max is None

    def missing(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if value is None]
