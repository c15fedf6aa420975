from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from pointgraph.domain.entities.geography import MAX_COORD


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- WALKERS ---------------------


class WalkerReferenceGraphModel(BaseModel):
    """Walk the tree, charge hops at their weight in the complete graph."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["reference_graph"] = "reference_graph"


class WalkerPointDistanceModel(BaseModel):
    """Walk the tree, charge hops at the point distance between consecutive pops."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["point_distance"] = "point_distance"


WalkerUnion = Annotated[
    WalkerReferenceGraphModel | WalkerPointDistanceModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class TourModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "tour"
    run_id: str = "local"
    points: list[tuple[int, int]]
    root: int = 0
    coord_max: int = MAX_COORD
    walker: WalkerUnion = Field(default_factory=WalkerReferenceGraphModel)
    greedy: bool = True
    log: LogModel = LogModel()

    @field_validator("coord_max")
    @classmethod
    def _bounded(cls, v: int, info: ValidationInfo) -> int:
        if not 0 <= v <= MAX_COORD:
            raise ValueError(f"{info.field_name} must be in [0, {MAX_COORD}]")
        return v

    @model_validator(mode="after")
    def _check_points(self):
        n = len(self.points)
        if n == 0:
            raise ValueError("points must not be empty")
        for x, y in self.points:
            if not (0 <= x <= self.coord_max and 0 <= y <= self.coord_max):
                raise ValueError(f"point ({x}, {y}) outside [0, {self.coord_max}]")
        if not 0 <= self.root < n:
            raise ValueError(f"root must be in [0, {n}), got {self.root}")
        return self
