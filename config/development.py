import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo employees/clients/projects/comments into the in-memory stores on startup
SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "1")))
