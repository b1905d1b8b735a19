import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

RECORDS_API_URL = os.getenv("RECORDS_API_URL", "")
API_TIMEOUT_SECONDS = int(os.getenv("API_TIMEOUT_SECONDS", "30"))

LOCAL_STORE_DIR = os.getenv("LOCAL_STORE_DIR") or None
HOLIDAYS_FILE = os.getenv("HOLIDAYS_FILE") or None

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
