from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    seed: int = 0
    name: str = "gps"  # scenario tag for RNG stream derivation


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class AdjacencyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    min_out_degree: int = 2
    max_out_degree: int = 8
    min_weight: int = 100
    max_weight: int = 2000

    @field_validator("min_out_degree", "max_out_degree", "min_weight", "max_weight")
    @classmethod
    def _nonneg(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.min_out_degree > self.max_out_degree:
            raise ValueError(
                f"min_out_degree {self.min_out_degree} > max_out_degree {self.max_out_degree}"
            )
        if self.min_weight > self.max_weight:
            raise ValueError(f"min_weight {self.min_weight} > max_weight {self.max_weight}")
        return self


# ----------------- DISTANCE ---------------------


class EdgeWeightModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["edge_weight"] = "edge_weight"


class GreatCircleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["great_circle"] = "great_circle"
    radius: float = 3959.0  # miles
    degrees: bool = False  # stored coordinates are used as radians unless set

    @field_validator("radius")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("radius must be > 0")
        return v


DistanceUnion = Annotated[EdgeWeightModel | GreatCircleModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class GpsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    session: SessionModel = Field(default_factory=SessionModel)
    log: LogModel = Field(default_factory=LogModel)
    adjacency: AdjacencyModel = Field(default_factory=AdjacencyModel)
    # distance modes offered to callers, one per kind
    distances: list[DistanceUnion] = Field(
        default_factory=lambda: [EdgeWeightModel(), GreatCircleModel()]
    )

    @model_validator(mode="after")
    def _unique_kinds(self):
        kinds = [d.kind for d in self.distances]
        if len(set(kinds)) != len(kinds):
            raise ValueError(f"distance kinds must be unique, got {kinds}")
        return self
