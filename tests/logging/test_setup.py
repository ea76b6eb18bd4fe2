# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for configure_logging — the logging entry point."""

from typing import Any

import pytest
import structlog

from flycors.core.config import Config
from flycors.logging.port import LoggingPort
from flycors.logging.setup import configure_logging
from flycors.logging.structlog_adapter import StructlogAdapter


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class RecordingLogging:
    def __init__(self) -> None:
        self.configured_with: list[Config] = []

    def configure(self, config: Config) -> None:
        self.configured_with.append(config)

    def get_logger(self, name: str) -> Any:
        return name

    def set_level(self, name: str, level: str) -> None:
        pass


class TestConfigureLogging:
    def test_defaults_to_structlog_adapter(self):
        port = configure_logging()

        assert isinstance(port, StructlogAdapter)
        assert isinstance(port, LoggingPort)

    def test_structlog_adapter_reads_config(self):
        port = configure_logging(Config({"flycors": {"logging": {"format": "json"}}}))

        assert port._format == "json"

    def test_custom_adapter_receives_config(self):
        config = Config({"flycors": {"logging": {"format": "json"}}})
        adapter = RecordingLogging()

        port = configure_logging(config, adapter)

        assert port is adapter
        assert adapter.configured_with == [config]

    def test_missing_config_uses_empty_config(self):
        adapter = RecordingLogging()

        configure_logging(adapter=adapter)

        assert adapter.configured_with[0].to_dict() == {}
