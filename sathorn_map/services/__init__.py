from sathorn_map.services.property_filter import apply_filter, compose_view
from sathorn_map.services.ai_search import AISearchRelay
from sathorn_map.services.analytics import build_analytics

__all__ = ["apply_filter", "compose_view", "AISearchRelay", "build_analytics"]
