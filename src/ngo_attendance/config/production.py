import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "directory": os.getenv("DATA_DIR", "/var/lib/ngo-attendance"),
    # Browser local storage allows roughly 5 MB per origin; keep blobs in that range.
    "quota_bytes": os.getenv("STORAGE_QUOTA_BYTES", str(5 * 1024 * 1024)),
}

DEBUG = False
