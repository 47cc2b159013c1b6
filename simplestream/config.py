"""Runtime configuration for simplestream.

Defaults point at the Ubuntu release stream. Every value can be overridden
through an environment variable:

- SIMPLESTREAM_HOST: host serving the stream (default: cloud-images.ubuntu.com)
- SIMPLESTREAM_PATH: path of the products document on that host
- SIMPLESTREAM_ARCH: architecture suffix used to select products (default: amd64)
- SIMPLESTREAM_IMAGE_TAG: item name of the disk image (default: disk1.img)
- SIMPLESTREAM_INFO_TAG: item field holding the checksum (default: sha256)
- SIMPLESTREAM_TIMEOUT: request timeout in seconds (default: 30)
"""

import math
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .logging_config import logger

SIMPLESTREAM_HOST = "cloud-images.ubuntu.com"
SIMPLESTREAM_PATH = "/releases/streams/v1/com.ubuntu.cloud:released:download.json"
ARCH_NAME = "amd64"
IMAGE_TAG = "disk1.img"
INFO_TAG = "sha256"
DEFAULT_TIMEOUT = 30  # seconds


@dataclass
class Config:
    """Configuration settings for a catalog query."""

    host: str = SIMPLESTREAM_HOST
    path: str = SIMPLESTREAM_PATH
    arch: str = ARCH_NAME
    image_tag: str = IMAGE_TAG
    info_tag: str = INFO_TAG
    timeout: float = DEFAULT_TIMEOUT

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}"

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        for name in ("host", "path", "arch", "image_tag", "info_tag"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty")

        if "://" in self.host or "/" in self.host:
            raise ConfigurationError(f"Host must be a bare hostname, got '{self.host}'")
        if not self.path.startswith("/"):
            raise ConfigurationError(f"Path must start with '/', got '{self.path}'")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, got {self.timeout}")


def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Returns:
        Validated configuration object

    Raises:
        ConfigurationError: If configuration is invalid
    """
    timeout_env = os.getenv("SIMPLESTREAM_TIMEOUT")
    timeout: float = DEFAULT_TIMEOUT
    if timeout_env:
        try:
            timeout = float(timeout_env)
        except ValueError:
            raise ConfigurationError(f"Invalid SIMPLESTREAM_TIMEOUT: '{timeout_env}'")

    config = Config(
        host=os.getenv("SIMPLESTREAM_HOST", SIMPLESTREAM_HOST),
        path=os.getenv("SIMPLESTREAM_PATH", SIMPLESTREAM_PATH),
        arch=os.getenv("SIMPLESTREAM_ARCH", ARCH_NAME),
        image_tag=os.getenv("SIMPLESTREAM_IMAGE_TAG", IMAGE_TAG),
        info_tag=os.getenv("SIMPLESTREAM_INFO_TAG", INFO_TAG),
        timeout=timeout,
    )
    config.validate()

    if config.host != SIMPLESTREAM_HOST or config.path != SIMPLESTREAM_PATH:
        logger.info(f"Using custom stream URL: {config.url}")

    return config
