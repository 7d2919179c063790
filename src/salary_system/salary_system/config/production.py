import os

LANGUAGE = os.getenv("APP_LANGUAGE", "ru")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
