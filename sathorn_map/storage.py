"""
Хранилище данных в памяти процесса: каталог объектов и журнал AI-запросов.
Экземпляры создаются в create_app() и достаются обработчиками через Depends.
"""
import json
import logging
import threading
from typing import Dict, Iterable, List, Optional

from fastapi import Request
from pydantic import ValidationError

from sathorn_map.data.seed import SATHORN_PROPERTIES
from sathorn_map.exceptions import InternalError, NotFoundError
from sathorn_map.models import AIQuery, Property, PropertyType
from sathorn_map.schemas.property import PropertyCreate, PropertyFilter
from sathorn_map.services.property_filter import apply_filter

logger = logging.getLogger(__name__)


class PropertyCatalogue:
    """Каталог объектов недвижимости. ID выдаются последовательно и не переиспользуются."""

    def __init__(self):
        self._properties: Dict[int, Property] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._properties)

    def get_all(self) -> List[Property]:
        return list(self._properties.values())

    def get_by_id(self, property_id: int) -> Property:
        property_obj = self._properties.get(property_id)
        if property_obj is None:
            raise NotFoundError("Property not found")
        return property_obj

    def create(self, record: PropertyCreate) -> Property:
        data = record.model_dump()
        data["type"] = PropertyType(data["type"])
        with self._lock:
            property_obj = Property(id=self._next_id, **data)
            self._properties[property_obj.id] = property_obj
            self._next_id += 1
        logger.debug(f"Added property {property_obj.id}: {property_obj.name}")
        return property_obj

    def filter(self, property_filter: PropertyFilter) -> List[Property]:
        return apply_filter(self.get_all(), property_filter)


class QueryLog:
    """Журнал AI-запросов, только добавление"""

    def __init__(self):
        self._queries: List[AIQuery] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._queries)

    def append(self, query: str, response: str, property_ids: Iterable[int]) -> AIQuery:
        serialized_ids = json.dumps(list(property_ids))
        with self._lock:
            record = AIQuery(
                id=self._next_id,
                query=query,
                response=response,
                property_ids=serialized_ids
            )
            self._queries.append(record)
            self._next_id += 1
        return record

    def recent(self, limit: int) -> List[AIQuery]:
        if limit <= 0:
            return []
        return list(reversed(self._queries[-limit:]))


def seed_catalogue(catalogue: PropertyCatalogue, records: Optional[List[dict]] = None) -> int:
    """Заполняет каталог фиксированным списком объектов. Возвращает число добавленных"""
    if records is None:
        records = SATHORN_PROPERTIES

    for record in records:
        try:
            validated = PropertyCreate.model_validate(record)
        except ValidationError as e:
            raise InternalError(f"Invalid seed record {record.get('name')!r}: {e}") from e
        catalogue.create(validated)

    logger.info(f"Catalogue seeded with {len(records)} properties")
    return len(records)


def get_catalogue(request: Request) -> PropertyCatalogue:
    return request.app.state.catalogue


def get_query_log(request: Request) -> QueryLog:
    return request.app.state.query_log
