"""
Mailgun delivery for password reset notifications.
Talks to the Mailgun messages REST endpoint directly with requests.
"""
from dataclasses import dataclass

import requests
import structlog

from utils.exceptions import NotificationError


logger = structlog.get_logger(__name__)

MAILGUN_US_BASE_URL = "https://api.mailgun.net"
MAILGUN_EU_BASE_URL = "https://api.eu.mailgun.net"


@dataclass(frozen=True)
class NotificationMessage:
    sender: str
    to: str
    subject: str
    body: str


class MailgunSender:
    def __init__(self, api_key: str, base_url: str = MAILGUN_US_BASE_URL, timeout: float = 10):
        """
        Initialize the Mailgun sender

        Args:
            api_key: Mailgun private API key
            base_url: API host, use MAILGUN_EU_BASE_URL for EU domains
            timeout: Per-request socket timeout in seconds
        """
        self.api_key = api_key
        self.base_url = (base_url or MAILGUN_US_BASE_URL).rstrip('/')
        self.timeout = timeout

    def send(self, message: NotificationMessage, domain: str) -> str:
        """
        Send a plain text message through a Mailgun domain.

        Returns:
            str: The Mailgun message id, or an empty string if none was returned

        Raises:
            NotificationError: The request failed or Mailgun rejected it
        """
        try:
            resp = requests.post(
                f"{self.base_url}/v3/{domain}/messages",
                auth=('api', self.api_key),
                data={
                    'from': message.sender,
                    'to': message.to,
                    'subject': message.subject,
                    'text': message.body,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NotificationError(f"Mailgun request failed: {e}") from e

        if not resp.ok:
            raise NotificationError(f"Mailgun rejected message ({resp.status_code}): {resp.text}")

        try:
            message_id = resp.json().get('id', '')
        except ValueError:
            message_id = ''

        logger.info("mailgun_message_queued", domain=domain, message_id=message_id)
        return message_id
