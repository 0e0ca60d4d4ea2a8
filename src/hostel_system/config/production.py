import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SIMULATED_LATENCY_MS = int(os.getenv("SIMULATED_LATENCY_MS", "0"))

SESSION_KEY = "hms_user"
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
