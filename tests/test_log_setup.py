from __future__ import annotations

import logging
import os
import unittest
from unittest.mock import patch

from log_setup import LOG_FORMAT, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def test_uses_log_level_from_environment(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}), patch("logging.basicConfig") as basic_config:
            level = configure_logging()
        self.assertEqual(level, logging.DEBUG)
        basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}), patch("logging.basicConfig"):
            self.assertEqual(configure_logging(), logging.INFO)

    def test_unset_level_uses_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch("logging.basicConfig"):
            self.assertEqual(configure_logging("WARNING"), logging.WARNING)


if __name__ == "__main__":
    unittest.main()
