import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Apps Script web app of the office spreadsheet; empty means local JSON store
RECORDS_API_URL = os.getenv("RECORDS_API_URL", "")
API_TIMEOUT_SECONDS = int(os.getenv("API_TIMEOUT_SECONDS", "30"))

# Defaults to <repo>/data when unset
LOCAL_STORE_DIR = os.getenv("LOCAL_STORE_DIR") or None

# Optional text file with one YYYY-MM-DD holiday per line
HOLIDAYS_FILE = os.getenv("HOLIDAYS_FILE") or None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Writes one sample hearing into an empty local store
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
