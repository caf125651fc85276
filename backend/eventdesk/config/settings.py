"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUE = {"1", "true", "yes", "on"}


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUE

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Persistence: "memory" or "prisma"
    PERSISTENCE_BACKEND = os.getenv("PERSISTENCE_BACKEND", "memory").lower()
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Notification channels, comma separated: email,sms,slack
    NOTIFICATION_CHANNELS = [
        channel.strip().lower()
        for channel in os.getenv("NOTIFICATION_CHANNELS", "").split(",")
        if channel.strip()
    ]

    # Email (SMTP)
    SMTP_SERVER = os.getenv("SMTP_SERVER", "smtp.gmail.com")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USER = os.getenv("SMTP_USER", "")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD", "")
    SMTP_SENDER = os.getenv("SMTP_SENDER", "")

    # SMS gateway
    SMS_GATEWAY_URL = os.getenv("SMS_GATEWAY_URL", "")
    SMS_API_KEY = os.getenv("SMS_API_KEY", "")
    SMS_SENDER_ID = os.getenv("SMS_SENDER_ID", "EventDesk")

    # Slack
    SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN", "")
    SLACK_DEFAULT_CHANNEL = os.getenv("SLACK_DEFAULT_CHANNEL", "")

    # Notification delivery policy (bounded retry, then drop)
    NOTIFY_MAX_ATTEMPTS: int = int(os.getenv("NOTIFY_MAX_ATTEMPTS", "3"))
    NOTIFY_BACKOFF_SECONDS: float = float(os.getenv("NOTIFY_BACKOFF_SECONDS", "0.5"))
    NOTIFY_TIMEOUT_SECONDS: float = float(os.getenv("NOTIFY_TIMEOUT_SECONDS", "10"))
    # Detached: notifications run in the background, responses don't wait for them
    NOTIFY_DETACHED = os.getenv("NOTIFY_DETACHED", "true").lower() in _TRUE


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    PERSISTENCE_BACKEND = "memory"
    NOTIFICATION_CHANNELS: list[str] = []
    NOTIFY_DETACHED = False
    NOTIFY_BACKOFF_SECONDS = 0.0


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
