import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # App
    APP_NAME: str = os.getenv("APP_NAME", "Salon Console API")
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Money
    CURRENCY: str = os.getenv("CURRENCY", "INR")
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₹")

    # Calendar
    BUSINESS_START_HOUR: int = int(os.getenv("BUSINESS_START_HOUR", "8"))
    BUSINESS_END_HOUR: int = int(os.getenv("BUSINESS_END_HOUR", "20"))
    PIXELS_PER_HOUR: int = int(os.getenv("PIXELS_PER_HOUR", "60"))
    SLOT_MINUTES: int = int(os.getenv("SLOT_MINUTES", "15"))

    # URLs
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")

    # Render
    RENDER_EXTERNAL_URL: str = os.getenv("RENDER_EXTERNAL_URL", "")
    RENDER: bool = os.getenv("RENDER", "False").lower() == "true"

    @property
    def IS_PRODUCTION(self):
        return self.RENDER or bool(self.RENDER_EXTERNAL_URL)

    @property
    def CORS_ORIGIN_LIST(self):
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
