from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    dashscope_api_key: str
    dashscope_app_id: str
    dashscope_base_url: str = "https://dashscope.aliyuncs.com/api/v1/apps"
    request_timeout: float = 60.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
