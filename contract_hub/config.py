import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    database_url: str = Field(
        default=os.getenv("DATABASE_URL", "sqlite:///./contract_hub.db")
    )
    db_pool_size: int = Field(default=int(os.getenv("DB_POOL_SIZE", "5")))
    db_max_overflow: int = Field(default=int(os.getenv("DB_MAX_OVERFLOW", "10")))
    db_pool_timeout: int = Field(default=int(os.getenv("DB_POOL_TIMEOUT", "30")))
    db_pool_recycle: int = Field(default=int(os.getenv("DB_POOL_RECYCLE", "1800")))

    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))
    log_json: bool = Field(
        default=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes")
    )

    # Listing defaults for the API
    default_page_size: int = Field(default=int(os.getenv("DEFAULT_PAGE_SIZE", "50")))
    max_page_size: int = Field(default=int(os.getenv("MAX_PAGE_SIZE", "200")))

    class Config:
        frozen = True


settings = Settings()
