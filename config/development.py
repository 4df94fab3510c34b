import os

from .config import DB_CONFIG, Config

SECRET_KEY = Config.SECRET_KEY

DB_CONFIG = dict(DB_CONFIG)

STORAGE = Config.STORAGE
LOG_LEVEL = "DEBUG"

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
