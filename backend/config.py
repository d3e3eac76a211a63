import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    PROJECT_NAME = "IC-Marking-Inspection"

    # Database settings
    DATABASE_NAME = os.getenv("DATABASE_NAME", "aoi")
    DATABASE_USER = os.getenv("DATABASE_USER", "postgres")
    DATABASE_PASSWORD = os.getenv("DATABASE_PASSWORD", "yourpassword")
    DATABASE_HOST = os.getenv("DATABASE_HOST", "postgres-db")
    DATABASE_PORT = int(os.getenv("DATABASE_PORT", 5432))
    DATABASE_URL = os.getenv(
        "DATABASE_URL",
        f"postgresql://{DATABASE_USER}:{DATABASE_PASSWORD}@{DATABASE_HOST}:{DATABASE_PORT}/{DATABASE_NAME}",
    )

    # JWT settings
    SECRET_KEY = os.getenv("SECRET_KEY", "use_random_secret_key")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 3000))
    ADMIN_TOKEN_EXPIRE_MINUTES = int(os.getenv("ADMIN_TOKEN_EXPIRE_MINUTES", 2000))

    # Initial admin account, created on startup when both are set
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")

    # Comma-separated list, "*" allows any origin
    CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Used until an admin stores its own values
    DEFAULT_GENUINE_THRESHOLD = float(os.getenv("DEFAULT_GENUINE_THRESHOLD", 0.85))
    DEFAULT_SUSPICIOUS_THRESHOLD = float(os.getenv("DEFAULT_SUSPICIOUS_THRESHOLD", 0.6))
    DEFAULT_CAMERAS = [name.strip() for name in os.getenv("DEFAULT_CAMERAS", "CAM-01,CAM-02,CAM-03").split(",") if name.strip()]

settings = Settings()
