import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "directory": os.getenv("DATA_DIR", "instance/data"),
    "quota_bytes": os.getenv("STORAGE_QUOTA_BYTES") or None,
}

DEBUG = True
