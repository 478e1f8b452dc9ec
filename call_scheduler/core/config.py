from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Call Scheduler"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" or "json"
    DATA_FILE: str = "./data/scheduler.json"

    # Weeks after the anchor date a recurring follow-up is projected onto.
    # 0 or less projects onto every later week.
    RECURRENCE_HORIZON_WEEKS: int = 1

    @property
    def recurrence_horizon(self) -> int | None:
        return self.RECURRENCE_HORIZON_WEEKS if self.RECURRENCE_HORIZON_WEEKS > 0 else None


settings = Settings()
