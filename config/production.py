import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "0")))
