import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module; development is the default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def service_days_from_env(default: str = "lunes,martes,miércoles,jueves,viernes") -> tuple[str, ...]:
    raw = os.getenv("SERVICE_DAYS", default)
    # Spanish day labels, resolved by the weekday registry at startup
    return tuple(d.strip() for d in raw.split(",") if d.strip())
