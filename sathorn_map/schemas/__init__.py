from sathorn_map.schemas.property import (
    PropertyCreate, PropertyResponse, PropertyFilter, PropertyViewRequest, PropertyViewResponse,
    NearbyPropertyResponse
)
from sathorn_map.schemas.search import (
    AISearchRequest, AISearchResponse, SearchSummary, PriceRange, AIQueryResponse
)
from sathorn_map.schemas.analytics import AnalyticsResponse, MarketTrend

__all__ = [
    "PropertyCreate", "PropertyResponse", "PropertyFilter", "PropertyViewRequest", "PropertyViewResponse",
    "NearbyPropertyResponse",
    "AISearchRequest", "AISearchResponse", "SearchSummary", "PriceRange", "AIQueryResponse",
    "AnalyticsResponse", "MarketTrend"
]
