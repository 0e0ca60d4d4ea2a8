import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hostel_system.config.production"

    if env in {"test", "testing"}:
        return "hostel_system.config.testing"

    return "hostel_system.config.development"
