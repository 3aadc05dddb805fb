"""
Random temporary password generation
"""
import secrets
import string


PASSWORD_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "!@#$%^&*()"


def generate_password(length: int, alphabet: str = PASSWORD_ALPHABET) -> str:
    """
    Generate a random password.

    Each character is drawn independently from `alphabet` using the OS
    CSPRNG, so no two calls share a seed.

    Args:
        length: Number of characters to generate
        alphabet: Characters to draw from

    Returns:
        str: The generated password
    """
    if length < 1:
        raise ValueError("Password length must be at least 1")
    if not alphabet:
        raise ValueError("Password alphabet must not be empty")

    return ''.join(secrets.choice(alphabet) for _ in range(length))
