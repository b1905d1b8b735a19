import os

SECRET_KEY = "test-secret"

# Tests always run against the local store
RECORDS_API_URL = ""
API_TIMEOUT_SECONDS = 5

LOCAL_STORE_DIR = os.getenv("LOCAL_STORE_DIR") or None
HOLIDAYS_FILE = None

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = False
