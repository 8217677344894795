from functools import lru_cache
from typing import List
import logging

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    bot_token: str = Field("", description="Telegram Bot Token")
    bot_name: str = Field("featurebot", description="Name used for the role database file")
    database_path: str = Field("", description="Explicit SQLite path; overrides bot_name when set")
    command_prefix: str = Field("!", description="Prefix marking a chat message as a command")

    # Telegram user IDs seeded into the administrator role when no roles exist yet
    admin_ids: List[int] = Field(default_factory=list, description="Bot Admins (numeric Telegram user IDs)")
    admin_role_name: str = Field("Administrators", description="Name of the bootstrap administrator role")

    allow_case_variant_roles: bool = Field(
        False, description="Allow roles whose names differ only by case"
    )
    log_level: str = Field("info", description="Logging level")
    log_dir: str = Field("", description="Directory for log files; defaults to ./logs")

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FEATUREBOT_",
        case_sensitive=False,
    )


def clear_settings_cache() -> None:
    get_settings.cache_clear()


@lru_cache()
def get_settings() -> Settings:
    logger.info("Loading application configuration settings.")
    return Settings()
