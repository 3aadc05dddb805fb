"""
Reset a user's password from the command line.

Usage: python reset_password.py EMAIL
"""
import sys

from config import Config
from extensions import build_reset_config
from utils.exceptions import ConfigurationError
from utils.logging_config import configure_logging
from utils.password_reset_service import PasswordResetService


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Usage: python reset_password.py EMAIL")
        return 2

    configure_logging(Config.LOG_LEVEL, Config.LOG_JSON)

    settings = {k: getattr(Config, k) for k in dir(Config) if k.isupper()}
    try:
        service = PasswordResetService(build_reset_config(settings))
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}")
        return 1

    email = argv[0]
    print(f"Attempting to reset password for {email}...")
    result = service.reset_password_by_email(email)

    if result.success:
        print(f"✅ Success: {result.message}")
        return 0

    print(f"❌ Failed: {result.message}")
    if result.error:
        print(f"   {result.error}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
