import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./creative_boost.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Creative Boost package defaults
    CREATIVE_BOOST_SERVICE_ID = data.get("CREATIVE_BOOST_SERVICE_ID", "srv-3")
    DEFAULT_MIN_CREDITS = data.get("DEFAULT_MIN_CREDITS", 30)
    DEFAULT_MAX_CREDITS = data.get("DEFAULT_MAX_CREDITS", 50)
    DEFAULT_PRICE_PER_CREDIT = data.get("DEFAULT_PRICE_PER_CREDIT", 1500)  # CZK per credit
    DEFAULT_REWARD_PER_CREDIT = data.get("DEFAULT_REWARD_PER_CREDIT", 80)  # colleague reward, CZK per credit

    # Updating a client month that does not exist is a no-op unless strict
    STRICT_CLIENT_MONTH_UPDATES = bool(data.get("STRICT_CLIENT_MONTH_UPDATES", False))

    # Engagement Sync Configuration
    ENGAGEMENT_SYNC_ENABLED = bool(data.get("ENGAGEMENT_SYNC_ENABLED", True))
    ENGAGEMENT_SYNC_INTERVAL_SECONDS = data.get("ENGAGEMENT_SYNC_INTERVAL_SECONDS", 86400)  # Daily

    # Colleague reward per credit overrides, keyed by client_id
    COLLEAGUE_REWARD_OVERRIDES = data.get("COLLEAGUE_REWARD_OVERRIDES", {})

    # Monthly statement PDF header
    STATEMENT_COMPANY_NAME = data.get("STATEMENT_COMPANY_NAME", "Creative Boost")
    STATEMENT_COMPANY_ADDRESS = data.get("STATEMENT_COMPANY_ADDRESS", "")
