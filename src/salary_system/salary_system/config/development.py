import os

# Message set for the shell: "ru" or "en"
LANGUAGE = os.getenv("APP_LANGUAGE", "ru")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = True
