import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sathorn_map.config import Settings, get_settings
from sathorn_map.exceptions import NotFoundError, InvalidInputError, UpstreamError, SathornMapError
from sathorn_map.routers import properties_router, search_router, analytics_router
from sathorn_map.services.ai_search import AISearchRelay, create_openai_client
from sathorn_map.storage import PropertyCatalogue, QueryLog, seed_catalogue

logger = logging.getLogger(__name__)

# Сообщения об ошибке валидации для конкретных эндпоинтов
VALIDATION_MESSAGES = {
    "/api/properties/filter": "Invalid filter parameters",
    "/api/properties/view": "Invalid filter parameters",
    "/api/search": "Invalid search query",
}


def configure_logging(settings: Settings):
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # ID, который не разбирается как число, не может существовать в каталоге
        if any(tuple(err.get("loc", ()))[:2] == ("path", "property_id") for err in exc.errors()):
            return JSONResponse(status_code=404, content={"message": "Property not found"})

        message = VALIDATION_MESSAGES.get(request.url.path, "Invalid request parameters")
        logger.info(f"Rejected request to {request.url.path}: {len(exc.errors())} validation errors")
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to process search query", "error": str(exc)}
        )

    @app.exception_handler(SathornMapError)
    async def app_error_handler(request: Request, exc: SathornMapError):
        logger.error(f"Error handling {request.url.path}: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": "Internal server error", "error": str(exc)}
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unexpected error handling {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "error": str(exc)}
        )


def create_app(
    settings: Optional[Settings] = None,
    catalogue: Optional[PropertyCatalogue] = None,
    query_log: Optional[QueryLog] = None,
    llm_client=None
) -> FastAPI:
    """
    Точка сборки приложения: создаёт каталог, журнал запросов и клиент
    языковой модели и передаёт их обработчикам через app.state
    """
    settings = settings or get_settings()

    if catalogue is None:
        catalogue = PropertyCatalogue()
        seed_catalogue(catalogue)
    if query_log is None:
        query_log = QueryLog()
    if llm_client is None:
        llm_client = create_openai_client(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Карта коммерческой и жилой недвижимости районов Сатхорн и Силом с AI-поиском",
        version="1.0.0"
    )

    app.state.settings = settings
    app.state.catalogue = catalogue
    app.state.query_log = query_log
    app.state.ai_relay = AISearchRelay(llm_client, catalogue, query_log, settings)

    app.include_router(properties_router)
    app.include_router(search_router)
    app.include_router(analytics_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


def build_app() -> FastAPI:
    """Фабрика для uvicorn: uvicorn sathorn_map.main:build_app --factory"""
    settings = get_settings()
    configure_logging(settings)
    return create_app(settings)
