"""Manages HTTP sessions used by the WebHDFS client."""
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Manages HTTP sessions with an explicit retry policy."""

    @staticmethod
    def create_session(max_retries: int) -> requests.Session:
        """
        Create a requests session.

        With ``max_retries=0`` every timed write is a single attempt.
        """
        session = requests.Session()
        retry = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=None,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        logger.debug(f"Created HTTP session with max_retries={max_retries}")
        return session
