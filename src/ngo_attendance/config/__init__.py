import os


def get_settings_module() -> str:
    # APP_ENV picks the settings profile; development is the default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "ngo_attendance.config.production"

    if env in {"test", "testing"}:
        return "ngo_attendance.config.testing"

    return "ngo_attendance.config.development"
