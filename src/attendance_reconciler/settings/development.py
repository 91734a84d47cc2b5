import os

from ._rules import disabled_rules_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DISABLED_RULES = disabled_rules_from_env()
