from typing import Dict
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MarketTrend(BaseModel):
    growth: float  # % к прошлому году


class AnalyticsResponse(BaseModel):
    """Агрегированная статистика по каталогу"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_properties: int
    type_distribution: Dict[str, int]
    price_distribution: Dict[str, int]
    average_prices: Dict[str, int]
    market_trends: Dict[str, MarketTrend]
