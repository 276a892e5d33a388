from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PropertyType(str, Enum):
    OFFICE = "office"
    RESIDENTIAL = "residential"
    RESTAURANT = "restaurant"


@dataclass(frozen=True)
class Property:
    """
    Объект недвижимости в районе Сатхорн/Силом.
    Создаётся один раз при старте и не изменяется до конца жизни процесса.
    """
    id: int
    name: str
    type: PropertyType
    lat: float
    lng: float
    area: int  # м²
    price_per_sqm: int  # THB за м²
    description: str
    address: str
    nearest_bts: Optional[str] = None
    bts_distance: Optional[int] = None  # метры до станции
    year_built: Optional[int] = None
    floors: Optional[int] = None

    def __repr__(self):
        return f"<Property(id={self.id}, name={self.name}, type={self.type.value})>"
