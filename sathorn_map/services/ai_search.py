"""
AI-поиск по каталогу.
Вопрос пользователя вместе с кратким описанием всех объектов отправляется
в языковую модель, модель отвечает JSON с текстом и ID подходящих объектов.
Ранжирование целиком на стороне модели, при ошибке результат не подбирается.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx
import openai
from openai import OpenAI
from pydantic import ValidationError

from sathorn_map.config import Settings, get_settings
from sathorn_map.exceptions import InvalidInputError, UpstreamError
from sathorn_map.models import Property
from sathorn_map.schemas.search import AISearchResponse, SearchSummary
from sathorn_map.services.geo import format_distance, nearby_properties, parse_coordinates

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a real estate AI assistant for Bangkok's Sathorn and Silom districts. Analyze user queries and provide helpful insights about properties.

Available properties: {context}
{nearby}
When responding, provide:
1. A natural language answer to the user's question
2. Relevant property IDs that match the query
3. Summary statistics if applicable

Respond in JSON format with:
{{
  "response": "Natural language response",
  "relevantPropertyIds": [array of property IDs],
  "summary": {{
    "count": number,
    "averagePrice": number,
    "priceRange": {{"min": number, "max": number}}
  }}
}}

Price format: Use ₿ symbol followed by formatted number (e.g., ₿350,000)
Distance format: Include units (e.g., 200m, 2km)
"""

NEARBY_PROMPT = """
The user referred to the location {lat}, {lng}. Properties within {radius} of it, nearest first: {candidates}
"""


def create_openai_client(settings: Optional[Settings] = None) -> OpenAI:
    """Клиент провайдера без повторных попыток: ошибка сразу уходит вызывающему"""
    settings = settings or get_settings()
    return OpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        max_retries=0,
        http_client=httpx.Client(timeout=settings.openai_timeout),
    )


class AISearchRelay:
    """
    Передаёт запрос пользователя в языковую модель и разбирает её ответ.
    Успешные запросы записываются в журнал.
    """

    def __init__(self, client, catalogue, query_log, settings: Optional[Settings] = None):
        self.client = client
        self.catalogue = catalogue
        self.query_log = query_log
        self.settings = settings or get_settings()

    def build_context(self, properties: List[Property]) -> List[Dict[str, Any]]:
        context = []
        for p in properties:
            item = {
                "id": p.id,
                "name": p.name,
                "type": p.type.value,
                "area": p.area,
                "pricePerSqm": p.price_per_sqm,
                "nearestBts": p.nearest_bts,
                "btsDistance": p.bts_distance,
            }
            if self.settings.ai_enhanced_context:
                item["lat"] = p.lat
                item["lng"] = p.lng
                item["address"] = p.address
            context.append(item)
        return context

    def build_nearby_context(self, query: str, properties: List[Property]) -> str:
        """Если в запросе есть координаты, добавляет в промпт ближайшие к ним объекты"""
        coordinates = parse_coordinates(query)
        if coordinates is None:
            return ""

        lat, lng = coordinates
        nearby = nearby_properties(
            properties, lat, lng,
            radius_m=self.settings.ai_nearby_radius_m,
            limit=self.settings.ai_nearby_limit
        )
        logger.debug(f"Query refers to ({lat}, {lng}), {len(nearby)} properties nearby")

        candidates = [
            {"id": p.id, "name": p.name, "distance": format_distance(d)}
            for p, d in nearby
        ]
        return NEARBY_PROMPT.format(
            lat=lat,
            lng=lng,
            radius=format_distance(self.settings.ai_nearby_radius_m),
            candidates=json.dumps(candidates, ensure_ascii=False)
        )

    def build_messages(self, query: str, properties: List[Property]) -> List[Dict[str, str]]:
        system = SYSTEM_PROMPT.format(
            context=json.dumps(self.build_context(properties), ensure_ascii=False),
            nearby=self.build_nearby_context(query, properties)
        )
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": query},
        ]

    def _complete(self, messages: List[Dict[str, str]]) -> str:
        try:
            completion = self.client.chat.completions.create(
                model=self.settings.openai_model,
                messages=messages,
                response_format={"type": "json_object"},
            )
        except openai.APIError as e:
            logger.error(f"Language model request failed: {e}")
            raise UpstreamError(str(e)) from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise UpstreamError("Empty response from language model")
        return content

    def _parse_reply(self, content: str) -> AISearchResponse:
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Language model returned non-JSON reply: {content[:200]!r}")
            raise UpstreamError(f"Malformed reply from language model: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError("Malformed reply from language model: expected a JSON object")

        # Сводка необязательна: если она битая, отбрасываем только её
        raw_summary = payload.pop("summary", None)

        try:
            result = AISearchResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Language model reply has unexpected shape: {e}")
            raise UpstreamError(f"Malformed reply from language model: {e.error_count()} invalid fields") from e

        if raw_summary is None:
            return result
        try:
            summary = SearchSummary.model_validate(raw_summary)
        except ValidationError as e:
            logger.warning(f"Dropped malformed summary from reply: {e.error_count()} invalid fields")
            return result
        return result.model_copy(update={"summary": summary})

    def search(self, query: str) -> AISearchResponse:
        if not query or not query.strip():
            raise InvalidInputError("Search query must not be empty")

        properties = self.catalogue.get_all()
        content = self._complete(self.build_messages(query, properties))
        result = self._parse_reply(content)

        # Модель может вернуть несуществующие или повторяющиеся ID
        known_ids = {p.id for p in properties}
        relevant_ids = list(dict.fromkeys(
            i for i in result.relevant_property_ids if i in known_ids
        ))
        if len(relevant_ids) != len(result.relevant_property_ids):
            logger.warning(
                f"Dropped unknown or duplicate property ids from reply: {result.relevant_property_ids}"
            )
            result = result.model_copy(update={"relevant_property_ids": relevant_ids})

        record = self.query_log.append(query, result.response, relevant_ids)
        logger.info(f"AI query {record.id} answered with {len(relevant_ids)} properties")
        return result
