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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./crm.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    CORS_ALLOW_HEADERS = data.get(
        "CORS_ALLOW_HEADERS", ["authorization", "x-client-info", "apikey", "content-type"]
    )
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    # Hosted auth provider (GoTrue-compatible REST API)
    AUTH_URL = data.get("AUTH_URL", "http://localhost:54321/auth/v1")
    AUTH_ANON_KEY = data.get("AUTH_ANON_KEY", "")
    AUTH_SERVICE_ROLE_KEY = data.get("AUTH_SERVICE_ROLE_KEY", "")
    AUTH_TIMEOUT_SECONDS = float(data.get("AUTH_TIMEOUT_SECONDS", 10))
    PORTAL_SIGNUP_URL = data.get(
        "PORTAL_SIGNUP_URL", "https://portal.camaleon.com.br/signup?email={email}"
    )
