from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_title: str = "Greeting Users API"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    database_name: str = "users_app"

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
