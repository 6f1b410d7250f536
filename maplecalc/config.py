from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MAPLECALC_"}

    # App
    app_name: str = "Maple Calculators"
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = ["*"]

    # Dashboard
    dashboard_port: int = 8050

    # Payoff loop guard: 1200 monthly periods = 100 years
    payoff_period_cap: int = 1200

    # Contribution limit tables are keyed off this year
    tax_year: int = 2025


settings = Settings()
