from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Logging
    LOG_LEVEL: str = "INFO"

    # Geo-targeting
    GEO_DECISION_LOGGING: bool = True  # one log line per ad decision
    DEMO_COUNTRY_FALLBACK: bool = True  # static country table for demo accounts


settings = Settings()
