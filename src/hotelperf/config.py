from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 54378
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "hotelperf"
    debug: bool = True
    default_period_days: int = 30
    forecast_history_days: int = 90
    forecast_horizon_days: int = 30
    occupancy_alert_threshold: int = 100  # Occupancy % above this is logged as a data-quality signal

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    class Config:
        env_file = ".env"


settings = Settings()
