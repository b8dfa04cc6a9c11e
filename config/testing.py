SECRET_KEY = "test-secret"

DOCUMENT_STORE = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "comedor_test",
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

LOG_LEVEL = "WARNING"
LOG_FILE = None

SERVICE_DAYS = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes")

DEV_TOKENS = {
    "admin-token": {"uid": "admin", "role": "admin", "name": "Administrador"},
    "coord-token": {"uid": "coord-ti", "role": "coordinator", "name": "Coordinador TI", "departmentId": "ti"},
    "coord-rh-token": {"uid": "coord-rh", "role": "coordinator", "name": "Coordinadora RH", "departmentId": "rh"},
    "no-role-token": {"uid": "nobody", "name": "Sin rol"},
}
