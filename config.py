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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./agencyhub.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_MINUTES = int(data.get("ACCESS_TOKEN_MINUTES", 15))
    # Base URL of the web app, used to build invite links
    APP_URL = data.get("APP_URL", "http://localhost:3000")
    # "hmac" requires INVITE_TOKEN_SECRET; the app refuses to start without it
    INVITE_TOKEN_HASH_POLICY = data.get("INVITE_TOKEN_HASH_POLICY", "hmac")
    INVITE_TOKEN_SECRET = data.get("INVITE_TOKEN_SECRET")
    INVITE_EXPIRATION_DAYS = int(data.get("INVITE_EXPIRATION_DAYS", 7))
