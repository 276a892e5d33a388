from fastapi import APIRouter, Depends

from sathorn_map.schemas.analytics import AnalyticsResponse
from sathorn_map.services.analytics import build_analytics
from sathorn_map.storage import PropertyCatalogue, get_catalogue

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsResponse)
def get_analytics(catalogue: PropertyCatalogue = Depends(get_catalogue)):
    """Статистика по каталогу: типы, цены, тренды рынка"""
    return build_analytics(catalogue.get_all())
