SECRET_KEY = "test-secret"

DB_CONFIG = None

# Tests never need a MySQL server.
STORAGE = "memory"
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
