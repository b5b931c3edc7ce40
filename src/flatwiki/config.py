"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

TEMPLATES_PATH = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    templates_dir: Path = TEMPLATES_PATH
    front_page: str = "FrontPage"
    app_title: str = "FlatWiki"
    debug: bool = False

    # Permissions for the page directory and the page files inside it
    dir_mode: int = 0o700
    file_mode: int = 0o600

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_prefix="FLATWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
