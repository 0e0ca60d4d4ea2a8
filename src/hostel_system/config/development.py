import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Emulates network latency on every store access (milliseconds)
SIMULATED_LATENCY_MS = int(os.getenv("SIMULATED_LATENCY_MS", "300"))

SESSION_KEY = "hms_user"
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
