from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AISearchRequest(BaseModel):
    """Запрос к AI-поиску на естественном языке"""
    query: str = Field(..., min_length=1, description="Текст запроса")

    @field_validator('query')
    @classmethod
    def validate_query(cls, v):
        if not v.strip():
            raise ValueError('Запрос не может быть пустым')
        return v


class PriceRange(BaseModel):
    min: float
    max: float


class SearchSummary(BaseModel):
    """Сводка по найденным объектам, которую формирует модель"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    count: Optional[int] = None
    average_price: Optional[float] = None
    price_range: Optional[PriceRange] = None


class AISearchResponse(BaseModel):
    """
    Ответ AI-поиска. Эта же схема валидирует JSON, который вернула модель:
    поля response и relevantPropertyIds обязательны.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    response: str
    relevant_property_ids: List[int]
    summary: Optional[SearchSummary] = None


class AIQueryResponse(BaseModel):
    """Запись журнала AI-запросов"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    query: str
    response: str
    property_ids: List[int]
    created_at: datetime
