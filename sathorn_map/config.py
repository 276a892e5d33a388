from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    app_name: str = "Sathorn Map"
    debug: bool = False

    # Ключ провайдера языковой модели. Без ключа подставляется заглушка,
    # ошибка авторизации всплывёт только при запросе к API
    openai_api_key: str = Field(
        default="default_key",
        validation_alias=AliasChoices("OPENAI_API_KEY", "OPENAI_API_KEY_ENV_VAR"),
    )
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-4o"
    openai_timeout: float = 60.0  # seconds

    # Настройки контекста для AI-поиска
    ai_enhanced_context: bool = True  # координаты и адрес в контексте
    ai_nearby_radius_m: float = 1000.0
    ai_nearby_limit: int = 5

    recent_queries_limit: int = 20

    class Config:
        env_file = ".env"
        populate_by_name = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()
