"""
Presentation context: where the rider is when the engine is asked for a survey.

MapOverview has no stop in scope. StopDetail carries the stop and the ids of
the routes serving it; the caller resolves those, the engine never does.
"""

from typing import Literal, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field


class Stop(BaseModel):
    """A transit stop as seen by the engine: its id and the routes serving it."""

    model_config = ConfigDict(frozen=True)

    id: str
    route_ids: Set[str] = Field(default_factory=set)


class MapOverview(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["map"] = "map"


class StopDetail(BaseModel):
    """Stop screen context. stop=None is a malformed context that never selects anything."""

    model_config = ConfigDict(frozen=True)

    type: Literal["stop"] = "stop"
    stop: Optional[Stop] = None


PresentationContext = Union[MapOverview, StopDetail]

MAP_OVERVIEW = MapOverview()
