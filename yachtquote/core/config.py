from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DEFAULT_WEEKS: int = 1
    DEFAULT_APA_PCT: float = 25.0

    QUOTE_LOCALE: str = "en_US"
    QUOTE_TITLE: str = "Charter Quote Breakdown:"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
