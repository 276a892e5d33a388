from sathorn_map.models.property import Property, PropertyType
from sathorn_map.models.ai_query import AIQuery

__all__ = ["Property", "PropertyType", "AIQuery"]
