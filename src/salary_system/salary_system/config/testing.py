LANGUAGE = "en"

LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True
