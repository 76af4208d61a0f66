from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    service_fee: float = 5.0  # flat booking fee, base currency
    max_scenario_cells: int = 500
    widget_rate_per_day: float = 50.0
