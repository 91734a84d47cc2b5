import os

from ._rules import disabled_rules_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DISABLED_RULES = disabled_rules_from_env()
