import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name):
    value = os.getenv(name)
    return int(value) if value else None


class Config:
    # Service role key: admin access to auth.users, never expose client-side
    SUPABASE_SECRET_KEY = os.getenv("SUPABASE_SECRET_KEY")
    SUPABASE_URL = os.getenv("SUPABASE_URL")

    MAILGUN_API_KEY = os.getenv("MAILGUN_API_KEY")
    MAILGUN_DOMAIN = os.getenv("MAILGUN_DOMAIN")
    # Set to https://api.eu.mailgun.net for EU domains
    MAILGUN_BASE_URL = os.getenv("MAILGUN_BASE_URL", "https://api.mailgun.net")

    # Optional overrides, unset values keep the service defaults
    PASSWORD_RESET_SALT_ROUNDS = _int_env("PASSWORD_RESET_SALT_ROUNDS")
    PASSWORD_RESET_LENGTH = _int_env("PASSWORD_RESET_LENGTH")
    PASSWORD_RESET_FROM_EMAIL = os.getenv("PASSWORD_RESET_FROM_EMAIL")
    PASSWORD_RESET_FROM_NAME = os.getenv("PASSWORD_RESET_FROM_NAME")
    PASSWORD_RESET_SUBJECT = os.getenv("PASSWORD_RESET_SUBJECT")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = os.getenv("LOG_JSON", "false").lower() in ("1", "true", "yes")
