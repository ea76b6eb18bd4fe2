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
"""Single entry point for wiring flycors logging."""

from __future__ import annotations

from flycors.core.config import Config
from flycors.logging.port import LoggingPort
from flycors.logging.structlog_adapter import StructlogAdapter


def configure_logging(config: Config | None = None, adapter: LoggingPort | None = None) -> LoggingPort:
    """Configure *adapter* (structlog by default) from *config* and return it.

    Usage:
        logging_port = configure_logging(Config.from_file("flycors.yaml"))
        logging_port.set_level("flycors.cors.evaluator", "DEBUG")
    """
    adapter = adapter if adapter is not None else StructlogAdapter()
    adapter.configure(config if config is not None else Config())
    return adapter
