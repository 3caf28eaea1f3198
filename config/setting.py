from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    API_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    SEED_DATA: bool = True
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
