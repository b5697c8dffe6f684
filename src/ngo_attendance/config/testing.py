SECRET_KEY = "test-secret"

STORAGE_CONFIG = {
    "backend": "memory",
}

DEBUG = False
TESTING = True
