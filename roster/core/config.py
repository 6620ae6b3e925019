"""Application configuration via environment variables."""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application
    app_name: str = "Roster Ledger"
    debug: bool = False
    log_dir: Path = Path.home() / ".logs" / "roster"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: str = "*"  # Comma-separated origins, or "*" for all

    # Database: DATABASE_URL wins over the DB_* parts
    database_url: str = ""
    db_host: str = ""
    db_port: int = 5432
    db_user: str = ""
    db_name: str = ""
    db_password: str = ""

    # Participant field set: "gender" counts teams by gender, "batch" does not
    participant_schema: Literal["gender", "batch"] = "gender"
    require_email: bool = True
    require_shirt_size: bool = True

    # Counter reconciliation job, 0 disables it
    recount_interval_minutes: int = 30

    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the connection URL from DATABASE_URL or the DB_* variables."""
        if self.database_url:
            return self.database_url
        if self.db_host:
            return (
                f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return "sqlite:///./roster.db"

    @property
    def gender_counting(self) -> bool:
        return self.participant_schema == "gender"


settings = Settings()
