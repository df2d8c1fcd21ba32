from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class TraceModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    detailed: bool = False  # default verbosity for runs that don't override it
    mirror_to_log: bool = True
    jsonl: bool = False


# ----------------- SEARCH ---------------------


class DijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"
    emit_detail: bool | None = None


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    emit_detail: bool | None = None


SearchUnion = Annotated[DijkstraModel | AStarModel, Field(discriminator="kind")]


# ----------------- GRAPH ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    lat: float
    lng: float


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    a: str
    b: str
    weight: float | None = None  # None => great-circle distance at insertion

    @field_validator("weight")
    @classmethod
    def _nonneg(cls, v: float | None, info: ValidationInfo) -> float | None:
        if v is not None and not v >= 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)


class ScatterModel(BaseModel):
    """Random nodes drawn uniformly inside a (lat0, lng0, lat1, lng1) box."""

    model_config = ConfigDict(extra="forbid")
    n: int = Field(default=10, ge=0)
    bbox: tuple[float, float, float, float] = (31.49, 74.31, 31.53, 74.40)

    @model_validator(mode="after")
    def _check_bbox(self):
        lat0, lng0, lat1, lng1 = self.bbox
        if lat0 > lat1 or lng0 > lng1:
            raise ValueError("bbox must be ordered (lat0, lng0, lat1, lng1) with lat0<=lat1, lng0<=lng1")
        return self


# ------------------------------------------------------------------


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "session"
    run_id: str = "local"
    seed: int = 123
    log: LogModel = LogModel()
    trace: TraceModel = TraceModel()
    search: SearchUnion = Field(default_factory=DijkstraModel)
    graph: GraphModel | None = None
    seed_example: bool = False
    scatter: ScatterModel | None = None
    auto_connect_k: int | None = Field(default=None, ge=1)
