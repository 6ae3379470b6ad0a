import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default):
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=_env_int("JWT_EXPIRES_DAYS", 7))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    QUOTE_REQUEST_RATE_LIMIT = os.getenv("QUOTE_REQUEST_RATE_LIMIT", "5 per hour")

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    UPLOAD_URL = os.getenv("UPLOAD_URL", "/uploads")
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024

    BRAND_NAME = os.getenv("BRAND_NAME", "Tangerine Luxury")
    FRONTEND_URL = os.getenv("FRONTEND_URL", "")
    SUPPORT_PHONE = os.getenv("SUPPORT_PHONE", "")
    SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL", "info@tangerineluxury.com")

    # Outbound mail
    MAIL_HOST = os.getenv("EMAIL_HOST")
    MAIL_PORT = _env_int("EMAIL_PORT", 465)
    MAIL_USERNAME = os.getenv("EMAIL_USER")
    MAIL_PASSWORD = os.getenv("EMAIL_PASS")
    MAIL_FROM = os.getenv("EMAIL_FROM", MAIL_USERNAME)
    MAIL_TIMEOUT = _env_int("EMAIL_TIMEOUT", 60)
    MAIL_SUPPRESS_SEND = _env_bool("EMAIL_SUPPRESS_SEND", False)
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", MAIL_USERNAME)
    CONSIGN_EMAIL = os.getenv("CONSIGN_EMAIL", "consign@tangerineluxury.com")

    # SMS gateway
    SMS_API_KEY = os.getenv("SMSGATEWAYHUB_API_KEY")
    SMS_SENDER_ID = os.getenv("SMSGATEWAYHUB_SENDER_ID", "WEBSMS")
    SMS_SEND_URL = os.getenv("SMS_SEND_URL", "https://www.smsgatewayhub.com/api/mt/SendSMS")
    SMS_BALANCE_URL = os.getenv("SMS_BALANCE_URL", "https://www.smsgatewayhub.com/api/mt/GetBalance")
    SMS_PROVIDER = "smsgatewayhub"
    SMS_TIMEOUT = _env_int("SMS_TIMEOUT", 30)
    SMS_DAILY_LIMIT = _env_int("SMS_DAILY_LIMIT", 1000)
    SMS_PER_USER_DAILY_LIMIT = _env_int("SMS_PER_USER_DAILY_LIMIT", 10)
    SMS_MIN_INTERVAL_SECONDS = _env_int("SMS_MIN_INTERVAL_SECONDS", 60)
    SMS_COST_PER_MESSAGE = 0.1
    SMS_TEST_NUMBER = os.getenv("SMS_TEST_NUMBER")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///storefront-dev.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    MAIL_SUPPRESS_SEND = True
    SMS_API_KEY = "test-api-key"
    RATELIMIT_STORAGE_URI = "memory://"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
