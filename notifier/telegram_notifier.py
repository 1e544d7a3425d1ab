"""Formatting and Telegram delivery of new show notifications."""
import logging
import os
from typing import Sequence

import requests

from processor.exceptions import NotificationError
from processor.models import Show

logger = logging.getLogger(__name__)

MESSAGE_HEADER = "New shows found:"


def format_new_shows_message(new_shows: Sequence[Show]) -> str:
    """
    Render new shows as a notification message.

    Args:
        new_shows: Non-empty list of new shows

    Returns:
        Header line followed by one "<title> -> <date> (<time>)" line per show
    """
    lines = [MESSAGE_HEADER]
    for show in new_shows:
        lines.append(
            f"{show.title} -> {show.date.isoformat()} "
            f"({show.time.strftime('%H:%M:%S')})"
        )
    return '\n'.join(lines)


class TelegramNotifier:
    """Sends messages to a Telegram chat through the Bot API."""

    API_URL = "https://api.telegram.org"

    def __init__(self, bot_token: str, chat_id: str, timeout: int = 30):
        """
        Args:
            bot_token: Telegram bot token
            chat_id: Destination chat identifier
            timeout: HTTP request timeout in seconds (default: 30)
        """
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.timeout = timeout

    @classmethod
    def from_env(cls, timeout: int = 30) -> 'TelegramNotifier':
        """
        Build a notifier from TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID.

        Raises:
            NotificationError: If either variable is missing or empty
        """
        bot_token = os.environ.get('TELEGRAM_BOT_TOKEN', '').strip()
        chat_id = os.environ.get('TELEGRAM_CHAT_ID', '').strip()
        missing = [
            name for name, value in (
                ('TELEGRAM_BOT_TOKEN', bot_token),
                ('TELEGRAM_CHAT_ID', chat_id),
            )
            if not value
        ]
        if missing:
            raise NotificationError(
                f"Missing environment variables: {', '.join(missing)}"
            )
        return cls(bot_token=bot_token, chat_id=chat_id, timeout=timeout)

    def send(self, message: str) -> None:
        """
        Send a text message to the configured chat.

        The text is passed as a query parameter and URL-encoded by requests.

        Raises:
            NotificationError: If the request fails or Telegram rejects it
        """
        url = f"{self.API_URL}/bot{self.bot_token}/sendMessage"
        try:
            response = requests.get(
                url,
                params={'chat_id': self.chat_id, 'text': message},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            # Drop the URL from the message, it contains the bot token
            raise NotificationError(
                f"Failed to send Telegram message: {type(e).__name__}"
            ) from e
        logger.info(f"Sent notification to chat {self.chat_id}")
