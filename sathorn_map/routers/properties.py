from typing import List
from fastapi import APIRouter, Depends, Query

from sathorn_map.schemas.property import (
    PropertyResponse, PropertyFilter, PropertyViewRequest, PropertyViewResponse, NearbyPropertyResponse
)
from sathorn_map.services.geo import format_distance, haversine_distance_m, nearby_properties
from sathorn_map.services.property_filter import compose_view
from sathorn_map.storage import PropertyCatalogue, get_catalogue

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("", response_model=List[PropertyResponse])
def get_properties(catalogue: PropertyCatalogue = Depends(get_catalogue)):
    """Получить все объекты в порядке добавления"""
    return catalogue.get_all()


@router.get("/nearby", response_model=List[NearbyPropertyResponse])
def get_nearby_properties(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    radius: float = Query(1000, gt=0, le=20000, description="Радиус поиска, м"),
    catalogue: PropertyCatalogue = Depends(get_catalogue)
):
    """Объекты в радиусе от точки на карте, ближайшие первыми"""
    nearby = nearby_properties(
        catalogue.get_all(), lat, lng, radius_m=radius, distance=haversine_distance_m
    )
    return [
        NearbyPropertyResponse(
            **PropertyResponse.model_validate(p).model_dump(),
            distance=round(d, 1),
            distance_label=format_distance(d)
        )
        for p, d in nearby
    ]


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: int, catalogue: PropertyCatalogue = Depends(get_catalogue)):
    """Получить объект недвижимости по ID"""
    return catalogue.get_by_id(property_id)


@router.post("/filter", response_model=List[PropertyResponse])
def filter_properties(
    property_filter: PropertyFilter,
    catalogue: PropertyCatalogue = Depends(get_catalogue)
):
    """Отфильтровать объекты по типу, цене, площади и станции BTS"""
    return catalogue.filter(property_filter)


@router.post("/view", response_model=PropertyViewResponse)
def get_property_view(
    view: PropertyViewRequest,
    catalogue: PropertyCatalogue = Depends(get_catalogue)
):
    """Объекты для отображения на карте с учётом фильтра и подсветки AI"""
    displayed, highlighted = compose_view(catalogue.get_all(), view.filter, view.highlighted_ids)
    return PropertyViewResponse(
        properties=[PropertyResponse.model_validate(p) for p in displayed],
        highlighted_ids=highlighted
    )
