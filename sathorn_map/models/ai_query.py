import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


@dataclass(frozen=True)
class AIQuery:
    """Запись журнала AI-запросов: текст вопроса, ответ модели и ID найденных объектов"""
    id: int
    query: str
    response: str
    property_ids: str  # JSON-массив ID объектов
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def property_id_list(self) -> List[int]:
        return json.loads(self.property_ids) if self.property_ids else []

    def __repr__(self):
        return f"<AIQuery(id={self.id}, query={self.query!r})>"
