from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vehicles_file: str = ""  # empty = start with an empty store
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:8000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
