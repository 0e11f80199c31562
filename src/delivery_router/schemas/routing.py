"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import Position, Stop, StopStatus


class PositionModel(BaseModel):
    lat: float
    lng: float

    def to_domain(self) -> Position:
        return Position(latitude=self.lat, longitude=self.lng)

    @classmethod
    def from_domain(cls, position: Position) -> "PositionModel":
        return cls(lat=position.latitude, lng=position.longitude)


class StopModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    address: str = ""
    phone: str = ""
    location: PositionModel
    status: StopStatus = StopStatus.PENDING

    def to_domain(self) -> Stop:
        return Stop(
            stop_id=self.id,
            name=self.name,
            address=self.address,
            phone=self.phone,
            position=self.location.to_domain(),
            status=self.status,
        )

    @classmethod
    def from_domain(cls, stop: Stop) -> "StopModel":
        return cls(
            id=stop.stop_id,
            name=stop.name,
            address=stop.address,
            phone=stop.phone,
            location=PositionModel.from_domain(stop.position),
            status=stop.status,
        )


class OptimizeRouteRequest(BaseModel):
    stops: List[StopModel] = Field(default_factory=list)
    starting_position: Optional[PositionModel] = Field(
        default=None,
        description="Driver's live position. The configured default is used when omitted.",
    )
    include_road_geometry: bool = Field(
        default=False,
        description="Fetch road polylines for map display. Never changes the stop order.",
    )


class NewStopModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    address: str = ""
    phone: str = ""
    location: Optional[PositionModel] = Field(
        default=None,
        description="Coordinates of the stop. When omitted the address is geocoded.",
    )


class AddStopRequest(OptimizeRouteRequest):
    new_stop: NewStopModel


class CompleteDeliveryRequest(BaseModel):
    stops: List[StopModel]
    stop_id: str


class RouteLegModel(BaseModel):
    stop_id: str
    sequence: int
    distance_from_prev_km: float


class RoadGeometryModel(BaseModel):
    source: str
    coordinates: List[List[float]]
    distance_km: Optional[float] = None


class OptimizeRouteResponse(BaseModel):
    stops: List[StopModel]
    origin: Optional[PositionModel] = None
    legs: List[RouteLegModel]
    total_distance_km: float
    spanning_tree_km: Optional[float] = None
    map_center: Optional[PositionModel] = None
    road_geometry: Optional[RoadGeometryModel] = None
    journey_complete: bool = False
    metadata: dict = Field(default_factory=dict)


class GeocodeRequest(BaseModel):
    address: str = Field(..., min_length=1)


class GeocodeResponse(BaseModel):
    address: str
    location: PositionModel
    resolved: bool
