"""
Exceptions raised by the password reset collaborators.
None of these escape PasswordResetService.reset_password_by_email.
"""


class PasswordResetError(Exception):
    """Base class for password reset errors"""


class ConfigurationError(PasswordResetError, ValueError):
    """Required configuration is missing or invalid"""


class AccountDirectoryError(PasswordResetError):
    """The account directory could not complete a lookup or write"""


class NotificationError(PasswordResetError):
    """The notification email could not be delivered to the provider"""
