import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))  # create_all on startup

    # Pagination
    PAGE_SIZE = data.get("PAGE_SIZE", 10)

    # Invoice numbering: <PREFIX>-YYYYMMDD-<sequence padded to MIN_DIGITS>
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")
    INVOICE_NUMBER_MIN_DIGITS = data.get("INVOICE_NUMBER_MIN_DIGITS", 4)

    # Credentials
    PASSWORD_HASH_ITERATIONS = data.get("PASSWORD_HASH_ITERATIONS", 390000)
    TOKEN_TOUCH_INTERVAL_SECONDS = data.get("TOKEN_TOUCH_INTERVAL_SECONDS", 60)  # last_used_at write throttle
