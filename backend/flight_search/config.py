from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_env: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Data sources
    # Empty base url -> the bundled JSON files are served in-process
    data_base_url: str = ""
    data_dir: Path = Path(__file__).parent / "data"
    airports_path: str = "airports.json"
    flights_path: str = "flights-from-AMS.json"
    fetch_timeout_seconds: float = 10.0

    # Search
    supported_origin: str = "AMS"
    search_delay_seconds: float = 0.5

    class Config:
        env_file = ".env"


# Istanza globale usata in tutto il progetto
settings = Settings()
