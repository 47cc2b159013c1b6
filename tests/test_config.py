"""Tests for configuration loading and validation."""

import unittest
from unittest.mock import patch

from simplestream.config import (
    ARCH_NAME,
    DEFAULT_TIMEOUT,
    IMAGE_TAG,
    INFO_TAG,
    SIMPLESTREAM_HOST,
    SIMPLESTREAM_PATH,
    Config,
    load_config,
)
from simplestream.exceptions import ConfigurationError


class TestConfigDefaults(unittest.TestCase):
    def test_defaults(self):
        config = Config()
        self.assertEqual(config.host, "cloud-images.ubuntu.com")
        self.assertEqual(config.arch, "amd64")
        self.assertEqual(config.image_tag, "disk1.img")
        self.assertEqual(config.info_tag, "sha256")
        self.assertEqual(config.timeout, DEFAULT_TIMEOUT)

    def test_url(self):
        self.assertEqual(
            Config().url,
            "https://cloud-images.ubuntu.com/releases/streams/v1/com.ubuntu.cloud:released:download.json",
        )

    def test_defaults_are_valid(self):
        Config().validate()


class TestConfigValidation(unittest.TestCase):
    def test_empty_values(self):
        for field in ("host", "path", "arch", "image_tag", "info_tag"):
            with self.subTest(field=field):
                config = Config(**{field: ""})
                with self.assertRaises(ConfigurationError) as cm:
                    config.validate()
                self.assertIn(field, str(cm.exception))

    def test_host_with_scheme(self):
        with self.assertRaises(ConfigurationError):
            Config(host="https://cloud-images.ubuntu.com").validate()

    def test_host_with_path(self):
        with self.assertRaises(ConfigurationError):
            Config(host="cloud-images.ubuntu.com/releases").validate()

    def test_relative_path(self):
        with self.assertRaises(ConfigurationError):
            Config(path="releases/streams/v1/index.json").validate()

    def test_non_positive_timeout(self):
        for timeout in (0, -5):
            with self.assertRaises(ConfigurationError):
                Config(timeout=timeout).validate()

    def test_non_finite_timeout(self):
        for timeout in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(timeout=timeout):
                with self.assertRaises(ConfigurationError):
                    Config(timeout=timeout).validate()


class TestLoadConfig(unittest.TestCase):
    @patch.dict("os.environ", {}, clear=True)
    def test_load_defaults(self):
        config = load_config()
        self.assertEqual(config.host, SIMPLESTREAM_HOST)
        self.assertEqual(config.path, SIMPLESTREAM_PATH)
        self.assertEqual(config.arch, ARCH_NAME)
        self.assertEqual(config.image_tag, IMAGE_TAG)
        self.assertEqual(config.info_tag, INFO_TAG)

    @patch.dict(
        "os.environ",
        {
            "SIMPLESTREAM_HOST": "mirror.example.com",
            "SIMPLESTREAM_PATH": "/ubuntu/streams/v1/download.json",
            "SIMPLESTREAM_ARCH": "arm64",
            "SIMPLESTREAM_IMAGE_TAG": "root.tar.xz",
            "SIMPLESTREAM_INFO_TAG": "md5",
            "SIMPLESTREAM_TIMEOUT": "2.5",
        },
        clear=True,
    )
    def test_load_overrides(self):
        config = load_config()
        self.assertEqual(config.url, "https://mirror.example.com/ubuntu/streams/v1/download.json")
        self.assertEqual(config.arch, "arm64")
        self.assertEqual(config.image_tag, "root.tar.xz")
        self.assertEqual(config.info_tag, "md5")
        self.assertEqual(config.timeout, 2.5)

    @patch.dict("os.environ", {"SIMPLESTREAM_TIMEOUT": "soon"}, clear=True)
    def test_invalid_timeout(self):
        with self.assertRaises(ConfigurationError) as cm:
            load_config()
        self.assertIn("SIMPLESTREAM_TIMEOUT", str(cm.exception))

    @patch.dict("os.environ", {"SIMPLESTREAM_PATH": "no-leading-slash.json"}, clear=True)
    def test_invalid_path_from_env(self):
        with self.assertRaises(ConfigurationError):
            load_config()


    @patch.dict("os.environ", {"SIMPLESTREAM_TIMEOUT": "nan"}, clear=True)
    def test_nan_timeout_from_env(self):
        with self.assertRaises(ConfigurationError) as cm:
            load_config()
        self.assertIn("positive number of seconds", str(cm.exception))

if __name__ == "__main__":
    unittest.main()
