"""Pydantic models of a recipe document.

The models only check structure (mappings, lists, scalar types).  Semantic
checks such as known kinds, label agreement or bucket ordering belong to
``RecipeValidator`` so they run in a fixed precedence after the conflict
check.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MetricSpec(BaseModel):
    """Name, kind and label schema of one metric."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str = ""
    labels: list[str] = Field(default_factory=list)
    buckets: list[float] = Field(default_factory=list)

    @field_validator("labels", mode="before")
    @classmethod
    def _labels_as_strings(cls, value):
        if isinstance(value, list):
            return [str(v) for v in value]
        return value


class LabelPair(BaseModel):
    """A single ``key: value`` label assignment."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str

    @field_validator("key", "value", mode="before")
    @classmethod
    def _scalar_as_string(cls, value):
        if isinstance(value, (int, float, bool)):
            return str(value)
        return value


class DataRow(BaseModel):
    """Label assignment plus the scripted value sequence for one series."""

    model_config = ConfigDict(frozen=True)

    labels: list[LabelPair] = Field(default_factory=list)
    sequence: str = ""

    @field_validator("sequence", mode="before")
    @classmethod
    def _sequence_as_string(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def label_keys(self) -> list[str]:
        return [pair.key for pair in self.labels]

    def label_map(self) -> dict[str, str]:
        return {pair.key: pair.value for pair in self.labels}


class Recipe(BaseModel):
    """One metric spec and its data rows."""

    model_config = ConfigDict(frozen=True)

    spec: MetricSpec = Field(default_factory=MetricSpec)
    data: list[DataRow] = Field(default_factory=list)
