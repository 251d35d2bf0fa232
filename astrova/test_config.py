from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from astrova.config import env_float, env_int, env_list, env_optional_int
from astrova.server_runner import uvicorn_options


class TestEnvHelpers(unittest.TestCase):
    def test_env_int(self) -> None:
        with patch.dict(os.environ, {"X_INT": " 42 "}):
            self.assertEqual(env_int("X_INT", 1), 42)
        with patch.dict(os.environ, {"X_INT": "many"}):
            self.assertEqual(env_int("X_INT", 7), 7)
        with patch.dict(os.environ, {"X_INT": "0"}):
            self.assertEqual(env_int("X_INT", 7, minimum=1), 1)

    def test_env_optional_int(self) -> None:
        with patch.dict(os.environ, {"X_OPT": ""}):
            self.assertIsNone(env_optional_int("X_OPT"))
        with patch.dict(os.environ, {"X_OPT": "nope"}):
            self.assertIsNone(env_optional_int("X_OPT"))
        with patch.dict(os.environ, {"X_OPT": "64"}):
            self.assertEqual(env_optional_int("X_OPT"), 64)

    def test_env_float_and_list(self) -> None:
        with patch.dict(os.environ, {"X_FLOAT": "2.5", "X_LIST": "http://a, http://b,,"}):
            self.assertEqual(env_float("X_FLOAT", 30.0), 2.5)
            self.assertEqual(env_list("X_LIST", ""), ["http://a", "http://b"])
        with patch.dict(os.environ, {"X_FLOAT": "soon"}):
            self.assertEqual(env_float("X_FLOAT", 30.0), 30.0)


class TestServerRunner(unittest.TestCase):
    def test_uvicorn_options_from_env(self) -> None:
        env = {
            "HOST": "127.0.0.1",
            "PORT": "9000",
            "WEB_CONCURRENCY": "0",
            "UVICORN_BACKLOG": "4",
            "UVICORN_LIMIT_CONCURRENCY": "",
        }
        with patch.dict(os.environ, env):
            options = uvicorn_options()
        self.assertEqual(options["host"], "127.0.0.1")
        self.assertEqual(options["port"], 9000)
        self.assertEqual(options["workers"], 1)
        self.assertEqual(options["backlog"], 16)
        self.assertIsNone(options["limit_concurrency"])


if __name__ == "__main__":
    unittest.main()
