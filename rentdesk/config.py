from dotenv import load_dotenv
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database configuration
    mysql_host: str = "db"
    mysql_user: str = "user"
    mysql_password: str = "123456"
    mysql_db: str = "rentdesk"
    mysql_port: str = "3306"
    database_url: Optional[str] = None

    # JWT configuration
    secret_key: str = "your_secret_key_here"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Application configuration
    debug: bool = False
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    # Label used when formatting monetary values
    currency: str = "BRL"


settings = Settings()

SECRET_KEY = settings.secret_key
ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes

DEBUG = settings.debug
APP_HOST = settings.app_host
APP_PORT = settings.app_port
LOG_LEVEL = settings.log_level.upper()
CURRENCY = settings.currency

# Database URL
DATABASE_URL = settings.database_url or (
    f"mysql+pymysql://{settings.mysql_user}:{settings.mysql_password}"
    f"@{settings.mysql_host}:{settings.mysql_port}/{settings.mysql_db}"
)
