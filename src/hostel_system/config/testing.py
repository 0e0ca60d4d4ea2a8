SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SIMULATED_LATENCY_MS = 0

SESSION_KEY = "hms_user"
SEED_DEMO_DATA = True
