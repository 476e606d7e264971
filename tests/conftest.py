"""Shared fixtures: isolated config and a recording fake AI client."""

from pathlib import Path
from unittest.mock import patch

import pytest

from wdym import config_file


@pytest.fixture(autouse=True)
def no_user_config():
    """Never read the developer's real ~/.config/wdym/config.toml."""
    config_file.reset()
    with patch.object(config_file, "CONFIG_PATH", Path("/nonexistent/wdym/config.toml")):
        yield
    config_file.reset()


class FakeClient:
    """Stands in for GeminiClient; records every call and returns a canned reply."""

    def __init__(self, reply="  fake reply  ", **kwargs):
        self.reply = reply
        self.kwargs = kwargs
        self.calls = []
        self.initialized = False
        self.closed = False

    def initialize(self):
        self.initialized = True

    async def cleanup(self):
        self.closed = True

    async def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self.reply

    async def generate_response(self, prompt):
        return await self._record("generate_response", prompt)

    async def generate_shell_command(self, query, shell="zsh", os_info="macOS (Darwin)"):
        return await self._record("generate_shell_command", query, shell=shell, os_info=os_info)

    async def generate_code(self, query):
        return await self._record("generate_code", query)

    async def analyze_file(self, content, query):
        return await self._record("analyze_file", content, query)

    async def analyze_command(self, command, output=""):
        return await self._record("analyze_command", command, output)

    async def edit_file(self, file_path, content, instruction):
        return await self._record("edit_file", file_path, content, instruction)


@pytest.fixture
def fake_ai():
    return FakeClient()
