"""
Admin-triggered password reset for Supabase accounts.

Generates a temporary password, stores its bcrypt hash on the account and
emails the plaintext to the user through Mailgun. Every outcome is returned
as a ResetResult; reset_password_by_email never raises.

Concurrent resets for the same account are not coordinated here: the last
write wins. Rate limiting and per-email serialization belong to the caller.
"""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Optional

import bcrypt
import structlog

from utils.account_directory import SupabaseAccountDirectory
from utils.exceptions import AccountDirectoryError, ConfigurationError
from utils.mailgun_sender import MailgunSender, NotificationMessage
from utils.password_generator import generate_password


USER_NOT_FOUND = "User not found"
UPDATE_FAILED = "Failed to update password"
UNEXPECTED_ERROR = "An unexpected error occurred"
RESET_SUCCESSFUL = "Password reset successful. An email has been sent with the new password."

MIN_SALT_ROUNDS = 4
MAX_SALT_ROUNDS = 31


def default_email_template(email: str, password: str) -> str:
    """Plain text body sent with the new password."""
    return f"""Hello,

Your password has been reset. Your new temporary password is: {password}

Please login with this password and change it immediately for security reasons.

This is an automated message, please do not reply."""


@dataclass(frozen=True)
class ResetOptions:
    salt_rounds: int = 10
    password_length: int = 10
    from_email: str = "noreply@yourdomain.com"
    from_name: str = "Password Reset"
    subject: str = "Your Password Has Been Reset"
    email_template: Callable[[str, str], str] = default_email_template

    def __post_init__(self):
        if not MIN_SALT_ROUNDS <= self.salt_rounds <= MAX_SALT_ROUNDS:
            raise ConfigurationError(
                f"salt_rounds must be between {MIN_SALT_ROUNDS} and {MAX_SALT_ROUNDS}"
            )
        if self.password_length < 1:
            raise ConfigurationError("password_length must be at least 1")
        if not callable(self.email_template):
            raise ConfigurationError("email_template must be callable")

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]] = None) -> "ResetOptions":
        """Build options from a mapping, keeping defaults for missing or None values."""
        return cls().with_overrides(**(overrides or {}))

    def with_overrides(self, **changes) -> "ResetOptions":
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ConfigurationError(f"Unknown password reset options: {sorted(unknown)}")
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_email}>"


@dataclass(frozen=True)
class ResetConfig:
    supabase_url: str
    supabase_key: str = field(repr=False)
    mailgun_api_key: str = field(repr=False)
    mailgun_domain: str
    options: ResetOptions = field(default_factory=ResetOptions)
    mailgun_base_url: Optional[str] = None

    def __post_init__(self):
        if not (self.supabase_url and self.supabase_key and self.mailgun_api_key and self.mailgun_domain):
            raise ConfigurationError("Missing required configuration parameters")
        if isinstance(self.options, Mapping):
            object.__setattr__(self, "options", ResetOptions.from_mapping(self.options))
        elif not isinstance(self.options, ResetOptions):
            raise ConfigurationError("options must be a ResetOptions or a mapping")


@dataclass(frozen=True)
class ResetResult:
    success: bool
    message: str
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {'success': self.success, 'message': self.message}
        if self.error is not None:
            result['error'] = self.error
        return result


def hash_password(password: str, salt_rounds: int) -> str:
    # GoTrue stores $2a$ hashes
    salt = bcrypt.gensalt(rounds=salt_rounds, prefix=b"2a")
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


class PasswordResetService:
    def __init__(self, config: ResetConfig, directory=None, sender=None, logger=None):
        """
        Initialize the password reset service

        Args:
            config: Connection settings and options
            directory: Object with find_by_email(email) and
                       update_credential_hash(user_id, hash). Defaults to
                       a SupabaseAccountDirectory built from the config.
            sender: Object with send(NotificationMessage, domain). Defaults
                    to a MailgunSender built from the config.
            logger: structlog logger, defaults to the module logger
        """
        if config is None:
            raise ConfigurationError("Missing required configuration parameters")

        self.config = config
        self.options = config.options
        self.directory = directory or SupabaseAccountDirectory.from_credentials(
            config.supabase_url, config.supabase_key
        )
        if sender is None:
            sender = MailgunSender(config.mailgun_api_key, config.mailgun_base_url)
        self.sender = sender
        self.log = logger or structlog.get_logger(__name__)

    def reset_password_by_email(self, email: str) -> ResetResult:
        """
        Reset a user's password and email them the new one.

        Args:
            email: The account's email address (exact match)

        Returns:
            ResetResult describing the outcome
        """
        log = self.log.bind(email=email)
        password_updated = False
        try:
            try:
                user = self.directory.find_by_email(email)
            except AccountDirectoryError as e:
                log.warning("password_reset_lookup_failed", error=str(e))
                user = None

            if not user:
                return ResetResult(False, USER_NOT_FOUND)

            new_password = generate_password(self.options.password_length)
            password_hash = hash_password(new_password, self.options.salt_rounds)

            try:
                self.directory.update_credential_hash(user['id'], password_hash)
            except AccountDirectoryError as e:
                log.error("password_reset_update_failed", user_id=user['id'], error=str(e))
                return ResetResult(False, UPDATE_FAILED)
            password_updated = True

            message = NotificationMessage(
                sender=self.options.sender,
                to=email,
                subject=self.options.subject,
                body=self.options.email_template(email, new_password),
            )
            self.sender.send(message, self.config.mailgun_domain)

            log.info("password_reset_completed", user_id=user['id'])
            return ResetResult(True, RESET_SUCCESSFUL)

        except Exception as e:
            if password_updated:
                # The stored hash already changed; the user never received the new password.
                log.error("password_reset_notification_failed", error=str(e), exc_info=True)
            else:
                log.error("password_reset_unexpected_error", error=str(e), exc_info=True)
            return ResetResult(False, UNEXPECTED_ERROR, error=str(e))
