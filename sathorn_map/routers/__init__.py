from sathorn_map.routers.properties import router as properties_router
from sathorn_map.routers.search import router as search_router
from sathorn_map.routers.analytics import router as analytics_router

__all__ = ["properties_router", "search_router", "analytics_router"]
