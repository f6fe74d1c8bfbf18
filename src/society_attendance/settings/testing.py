import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "society_attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ALLOWED_EMAIL_DOMAIN = "sorsu.edu.ph"
MEMBERS_PER_PAGE = 10
AFTERNOON_START_HOUR = 12
ACADEMIC_YEAR = 2025

AUTO_INIT_DB = False
AUTO_SEED_DB = False
