"""HTTP client utilities with consistent user agent."""

from typing import Optional

import requests

from .exceptions import FetchError
from .logging_config import logger


def _get_package_version() -> str:
    """Get the package version for User-Agent header."""
    from . import __version__

    return __version__


USER_AGENT = f"simplestream/{_get_package_version()}"


def get_default_headers(accept: Optional[str] = None) -> dict:
    """
    Get default HTTP headers with user agent.

    Args:
        accept: Optional Accept header value (e.g., "application/json")

    Returns:
        Dictionary of HTTP headers
    """
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    return headers


def fetch_document(url: str, timeout: float) -> str:
    """
    Fetch a Simplestream document with a single blocking GET.

    No retries are attempted.

    Args:
        url: HTTPS URL of the products document
        timeout: Request timeout in seconds

    Returns:
        Response body as text

    Raises:
        FetchError: On connection, TLS or timeout failures and non-2xx replies
    """
    logger.info(f"Fetching {url}")
    try:
        response = requests.get(url, headers=get_default_headers("application/json"), timeout=timeout)
    except requests.exceptions.SSLError as e:
        raise FetchError(f"TLS verification failed for {url}: {e}")
    except requests.exceptions.ConnectionError:
        raise FetchError(f"Failed to connect to {url}")
    except requests.exceptions.Timeout:
        raise FetchError(f"Request to {url} timed out after {timeout}s")
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}")

    if not response.ok:
        raise FetchError(f"Failed to fetch {url}. [{response.status_code}]")

    logger.debug(f"Received {len(response.content)} bytes from {url}")
    return response.text
