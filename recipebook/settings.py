from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Quantity formatting
    default_locale: str = "en-US"
    significant_digits: int = 4
    fraction_max_denominator: int = 16

    # Logging
    log_level: str = "INFO"

    # Rate limiting (per-IP)
    rate_limit: str = "100/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
