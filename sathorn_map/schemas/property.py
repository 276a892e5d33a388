from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from sathorn_map.models.property import PropertyType


class PropertyBase(BaseModel):
    """Базовая схема объекта недвижимости"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1)
    type: PropertyType
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    area: int = Field(..., gt=0, description="Площадь, м²")
    price_per_sqm: int = Field(..., gt=0, description="Цена за м², THB")
    description: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    nearest_bts: Optional[str] = None
    bts_distance: Optional[int] = Field(None, ge=0, description="Расстояние до станции BTS, м")
    year_built: Optional[int] = None
    floors: Optional[int] = Field(None, gt=0)


class PropertyCreate(PropertyBase):
    """Схема для добавления объекта в каталог"""
    pass


class PropertyResponse(PropertyBase):
    """Схема ответа с объектом недвижимости"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int


class PropertyFilter(BaseModel):
    """
    Фильтр объектов. Незаданные поля не ограничивают выборку,
    границы диапазонов включительные.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "types": ["restaurant"],
                "priceMin": 400000,
                "nearBts": ["Sala Daeng", "Chong Nonsi"]
            }
        }
    )

    types: Optional[List[PropertyType]] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    area_min: Optional[float] = None
    area_max: Optional[float] = None
    near_bts: Optional[List[str]] = None

    @field_validator('price_min', 'price_max', 'area_min', 'area_max', mode='before')
    @classmethod
    def validate_number(cls, v):
        # Строки и bool не приводим к числу
        if v is not None and (isinstance(v, bool) or not isinstance(v, (int, float))):
            raise ValueError('Ожидается число')
        return v


class PropertyViewRequest(BaseModel):
    """Текущее состояние карты: активный фильтр и подсвеченные AI объекты"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    filter: PropertyFilter = Field(default_factory=PropertyFilter)
    highlighted_ids: List[int] = []


class PropertyViewResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    properties: List[PropertyResponse]
    highlighted_ids: List[int]


class NearbyPropertyResponse(PropertyResponse):
    """Объект с расстоянием до заданной точки"""
    distance: float = Field(description="Расстояние, м")
    distance_label: str
