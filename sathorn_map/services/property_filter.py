from typing import Iterable, List, Optional, Tuple

from sathorn_map.models import Property
from sathorn_map.schemas.property import PropertyFilter


def apply_filter(properties: Iterable[Property], property_filter: PropertyFilter) -> List[Property]:
    """
    Отбирает объекты, удовлетворяющие всем заданным условиям фильтра.
    Порядок входной последовательности сохраняется, пустой результат допустим.
    """
    result = list(properties)

    if property_filter.types:
        types = set(property_filter.types)
        result = [p for p in result if p.type in types]

    if property_filter.price_min is not None:
        result = [p for p in result if p.price_per_sqm >= property_filter.price_min]

    if property_filter.price_max is not None:
        result = [p for p in result if p.price_per_sqm <= property_filter.price_max]

    if property_filter.area_min is not None:
        result = [p for p in result if p.area >= property_filter.area_min]

    if property_filter.area_max is not None:
        result = [p for p in result if p.area <= property_filter.area_max]

    if property_filter.near_bts:
        stations = set(property_filter.near_bts)
        result = [p for p in result if p.nearest_bts and p.nearest_bts in stations]

    return result


def compose_view(
    properties: Iterable[Property],
    property_filter: PropertyFilter,
    highlighted_ids: Optional[Iterable[int]] = None
) -> Tuple[List[Property], List[int]]:
    """
    Формирует набор объектов для карты: результат фильтра,
    пересечённый с подсвеченными AI объектами (если они есть).
    Возвращает (отображаемые объекты, ID подсвеченных среди них).
    """
    filtered = apply_filter(properties, property_filter)

    highlighted = set(highlighted_ids or [])
    if not highlighted:
        return filtered, []

    displayed = [p for p in filtered if p.id in highlighted]
    return displayed, [p.id for p in displayed]
