from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    es_host: str = "http://127.0.0.1:9200"
    es_timeout_s: float = 30.0

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
