from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_PATH = (
    Path.home() / "AppData" / "LocalLow" / "Wizards Of The Coast" / "MTGA" / "Player.log"
)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARENALOG_")

    app_name: str = "arenalog"

    # Arena writes Player.log here on Windows; override for other platforms
    log_path: Path = DEFAULT_LOG_PATH

    data_dir: Path = Path(__file__).parent.parent / "data"
    catalog_file: str = "default-cards.json"
    arena_mapping_file: str = "arena-mapping.json"

    log_level: str = "INFO"

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file

    @property
    def arena_mapping_path(self) -> Path:
        return self.data_dir / self.arena_mapping_file


settings = Settings()
