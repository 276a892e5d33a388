from typing import Dict, Iterable

from sathorn_map.models import Property, PropertyType

# Рост цен к прошлому году, %. Берётся из внешних отчётов, не вычисляется
MARKET_TRENDS = {
    PropertyType.OFFICE.value: {"growth": 5.2},
    PropertyType.RESIDENTIAL.value: {"growth": 3.8},
    PropertyType.RESTAURANT.value: {"growth": 12.1},
}

PRICE_BUCKETS = [
    ("200-300K", 300000),
    ("300-400K", 400000),
    ("400-500K", 500000),
]
TOP_PRICE_BUCKET = "500K+"


def price_bucket(price_per_sqm: int) -> str:
    for label, upper in PRICE_BUCKETS:
        if price_per_sqm < upper:
            return label
    return TOP_PRICE_BUCKET


def build_analytics(properties: Iterable[Property]) -> Dict:
    """
    Статистика по каталогу для дашборда:
    - распределение по типам
    - гистограмма цен за м²
    - средняя цена по каждому типу (0, если объектов нет)
    """
    properties = list(properties)

    type_distribution: Dict[str, int] = {}
    for p in properties:
        type_distribution[p.type.value] = type_distribution.get(p.type.value, 0) + 1

    price_distribution = {label: 0 for label, _ in PRICE_BUCKETS}
    price_distribution[TOP_PRICE_BUCKET] = 0
    for p in properties:
        price_distribution[price_bucket(p.price_per_sqm)] += 1

    average_prices = {}
    for property_type in PropertyType:
        prices = [p.price_per_sqm for p in properties if p.type == property_type]
        # Округление половины вверх
        average_prices[property_type.value] = int(sum(prices) / len(prices) + 0.5) if prices else 0

    return {
        "total_properties": len(properties),
        "type_distribution": type_distribution,
        "price_distribution": price_distribution,
        "average_prices": average_prices,
        "market_trends": MARKET_TRENDS,
    }
