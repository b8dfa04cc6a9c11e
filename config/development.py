import os

from config import service_days_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | mysql
DOCUMENT_STORE = os.getenv("DOCUMENT_STORE", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "comedor_db"),
}

DEBUG = True

# If enabled (and DOCUMENT_STORE=mysql), the documents table is created on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo departments and employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None

SERVICE_DAYS = service_days_from_env()

# Sign-in tokens accepted by the static identity provider
DEV_TOKENS = {
    "admin-token": {"uid": "admin", "role": "admin", "name": "Administrador"},
    "coord-token": {"uid": "coord-ti", "role": "coordinator", "name": "Coordinador TI", "departmentId": "ti"},
}
