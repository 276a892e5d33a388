"""
Геометрия для карты: поиск координат в тексте запроса и расстояния до объектов
"""
import math
import re
from typing import Callable, Iterable, List, Optional, Tuple

from sathorn_map.models import Property

METERS_PER_DEGREE = 111320.0
EARTH_RADIUS_M = 6371e3

# Две десятичные дроби через запятую, минимум три знака после точки.
# Целые числа ("2 bedrooms, 3 floors") под шаблон не попадают
COORDINATES_RE = re.compile(
    r'(?<![\d.])(-?\d{1,2}\.\d{3,})\s*,\s*(-?\d{1,3}\.\d{3,})(?![\d.])'
)


def parse_coordinates(text: str) -> Optional[Tuple[float, float]]:
    """Возвращает первую пару (широта, долгота) из текста или None"""
    if not text:
        return None

    for match in COORDINATES_RE.finditer(text):
        lat, lng = float(match.group(1)), float(match.group(2))
        if -90 <= lat <= 90 and -180 <= lng <= 180:
            return lat, lng
    return None


def planar_distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Равнопромежуточная проекция: достаточно точна на масштабе района"""
    dy = (lat2 - lat1) * METERS_PER_DEGREE
    dx = (lng2 - lng1) * METERS_PER_DEGREE * math.cos(math.radians(lat1))
    return math.hypot(dx, dy)


def haversine_distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def format_distance(distance: float) -> str:
    if distance < 1000:
        return f"{round(distance)}m"
    return f"{distance / 1000:.1f}km"


def nearby_properties(
    properties: Iterable[Property],
    lat: float,
    lng: float,
    radius_m: float,
    limit: Optional[int] = None,
    distance: Callable[[float, float, float, float], float] = planar_distance_m
) -> List[Tuple[Property, float]]:
    """Объекты в радиусе radius_m от точки, от ближайшего к дальнему"""
    candidates = []
    for p in properties:
        d = distance(lat, lng, p.lat, p.lng)
        if d <= radius_m:
            candidates.append((p, d))

    candidates.sort(key=lambda item: item[1])
    if limit is not None:
        candidates = candidates[:limit]
    return candidates
