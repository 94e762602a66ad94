from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Supabase (document store)
    supabase_url: str = ""  # derived from db_host/db_port when empty
    supabase_key: str = ""
    db_host: str = "localhost"
    db_port: int = 54321
    db_schema: str = "public"

    # Collections
    accounts_table: str = "accounts"
    profile_table: str = "profile"

    # Image service
    picture_timeout_seconds: float = 5.0

    # App
    app_name: str = "user-account-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origin: str = "http://localhost:3000"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def database_url(self) -> str:
        if self.supabase_url:
            return self.supabase_url
        return f"http://{self.db_host}:{self.db_port}"

    def get_cors_origins_list(self) -> List[str]:
        origin = self.cors_origin.strip()
        return [origin] if origin else []

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
