from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request

from sathorn_map.schemas.search import AISearchRequest, AISearchResponse, AIQueryResponse
from sathorn_map.services.ai_search import AISearchRelay
from sathorn_map.storage import QueryLog, get_query_log

router = APIRouter(prefix="/api/search", tags=["search"])


def get_ai_relay(request: Request) -> AISearchRelay:
    return request.app.state.ai_relay


@router.post("", response_model=AISearchResponse, response_model_exclude_none=True)
def search(search_request: AISearchRequest, relay: AISearchRelay = Depends(get_ai_relay)):
    """Поиск объектов по запросу на естественном языке"""
    return relay.search(search_request.query)


@router.get("/recent", response_model=List[AIQueryResponse])
def get_recent_queries(
    request: Request,
    limit: Optional[int] = Query(None, ge=1, le=100),
    query_log: QueryLog = Depends(get_query_log)
):
    """Последние AI-запросы, новые первыми"""
    if limit is None:
        limit = request.app.state.settings.recent_queries_limit

    return [
        AIQueryResponse(
            id=record.id,
            query=record.query,
            response=record.response,
            property_ids=record.property_id_list,
            created_at=record.created_at
        )
        for record in query_log.recent(limit)
    ]
