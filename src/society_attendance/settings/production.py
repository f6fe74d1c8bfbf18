import os
from datetime import date

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "society_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ALLOWED_EMAIL_DOMAIN = os.getenv("ALLOWED_EMAIL_DOMAIN", "sorsu.edu.ph")
MEMBERS_PER_PAGE = int(os.getenv("MEMBERS_PER_PAGE", "10"))
AFTERNOON_START_HOUR = int(os.getenv("AFTERNOON_START_HOUR", "12"))
ACADEMIC_YEAR = int(os.getenv("ACADEMIC_YEAR", str(date.today().year)))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
