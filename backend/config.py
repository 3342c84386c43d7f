from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from faq.matcher import DEFAULT_CATEGORY_WEIGHT, DEFAULT_KEYWORD_WEIGHT, DEFAULT_THRESHOLD
from faq.templates import DEFAULT_SUPPORT_EMAIL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    faq_threshold: float = Field(DEFAULT_THRESHOLD, alias="FAQ_THRESHOLD", ge=0.0, le=1.0)
    faq_category_weight: float = Field(DEFAULT_CATEGORY_WEIGHT, alias="FAQ_CATEGORY_WEIGHT", ge=0.0, le=1.0)
    faq_keyword_weight: float = Field(DEFAULT_KEYWORD_WEIGHT, alias="FAQ_KEYWORD_WEIGHT", ge=0.0, le=1.0)
    faq_path: Optional[Path] = Field(None, alias="FAQ_PATH")
    support_email: str = Field(DEFAULT_SUPPORT_EMAIL, alias="SUPPORT_EMAIL")

    database_url: str = Field("sqlite:///./faq_history.db", alias="DATABASE_URL")
    query_log_enabled: bool = Field(True, alias="QUERY_LOG_ENABLED")
    operator_history_token: Optional[str] = Field(None, alias="OPERATOR_HISTORY_TOKEN")

    allowed_origins: List[str] = Field(default_factory=lambda: ["*"], alias="ALLOWED_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8000, alias="PORT", ge=1, le=65535)


@lru_cache
def get_settings() -> Settings:
    return Settings()
