import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./spacetime.db")
    SECRET_KEY = os.getenv("SECRET_KEY", "spacetime-dev-secret-change-me")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24 * 30))

    # When disabled every route is open and memories are owned by ANONYMOUS_USER_ID
    AUTH_ENABLED = os.getenv("AUTH_ENABLED", "True").lower() == "true"
    ANONYMOUS_USER_ID = os.getenv("ANONYMOUS_USER_ID", "00000000-0000-0000-0000-000000000000")

    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
    MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", 1024 * 1024 * 5))
    UPLOAD_CHUNK_SIZE = int(os.getenv("UPLOAD_CHUNK_SIZE", 64 * 1024))

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "")
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
    LOG_FILE = os.getenv("LOG_FILE", "spacetime.log")


settings = Settings()
