import os

# No defaults: both must come from the environment.
DATABASE_URL = os.getenv("DATABASE_URL")
PORT = int(os.environ["PORT"]) if os.getenv("PORT") else None

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
