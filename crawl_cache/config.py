# === FILE: crawl_cache/config.py ===
"""
Конфигурация загрузчика с файловым кэшем.
Используется Pydantic для описания схемы; значения не проверяются на диапазон.
"""
from __future__ import annotations

from typing import Final, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Windows NT 10.0; WOW64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)


class CacheConfig(BaseModel):
    """Настройки HTTP-клиента и паузы после загрузки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(DEFAULT_USER_AGENT, description="Заголовок User-Agent.")
    timeout: Optional[float] = Field(
        None, description="Таймаут на один запрос (секунд); None — таймаут aiohttp по умолчанию."
    )
    post_fetch_delay: Optional[float] = Field(
        None, description="Пауза после успешной загрузки при промахе кэша (секунд)."
    )

    def with_user_agent(self, user_agent: str) -> CacheConfig:
        return self.model_copy(update={"user_agent": user_agent})

    def with_timeout(self, timeout: float) -> CacheConfig:
        return self.model_copy(update={"timeout": timeout})

    def with_post_fetch_delay(self, delay: float) -> CacheConfig:
        return self.model_copy(update={"post_fetch_delay": delay})


__all__ = ["CacheConfig", "DEFAULT_USER_AGENT"]
