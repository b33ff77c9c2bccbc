from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Materiales y Construcción"
    COMPANY_EMAIL: str = ""
    COMPANY_PHONE: str = ""

    # Renderer hint. Quantities come back unformatted apart from their unit.
    NUMBER_LOCALE: str = "es-MX"

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
