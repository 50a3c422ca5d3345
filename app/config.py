from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="MENU_", extra="ignore"
    )

    app_name: str = "Restaurant Menu API"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # "counter" never reuses ids; "length" reproduces the old len(items) + 1 ids
    id_strategy: Literal["counter", "length"] = "counter"
    seed_data: bool = True


settings = Settings()
