from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ForgeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FORGE_", case_sensitive=False)

    log_level: str = "INFO"
    marker_file_name: str = ".gitkeep"
