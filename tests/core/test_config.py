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
"""Tests for the configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from flycors.config.properties import CORSProperties, LoggingProperties
from flycors.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"flycors": {"cors": {"default_policy_name": "api"}}})
        assert config.get("flycors.cors.default_policy_name") == "api"

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "fallback") == "fallback"

    def test_get_section(self):
        config = Config({"flycors": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("flycors.logging.level") == {"root": "DEBUG"}
        assert config.get_section("flycors.missing") == {}

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("FLYCORS_CORS_DEFAULT_POLICY_NAME", "from-env")
        config = Config({"flycors": {"cors": {"default_policy_name": "from-file"}}})
        assert config.get("flycors.cors.default_policy_name") == "from-env"


class TestPlaceholders:
    def test_config_reference(self):
        config = Config({"app": {"name": "site"}, "flycors": {"cors": {"default_policy_name": "${app.name}"}}})
        assert config.get("flycors.cors.default_policy_name") == "site"

    def test_default_value(self):
        config = Config({"x": "${FLYCORS_TEST_UNSET_VAR:fallback}"})
        assert config.get("x") == "fallback"

    def test_unresolvable_raises(self):
        config = Config({"x": "${FLYCORS_TEST_UNSET_VAR}"})
        with pytest.raises(ValueError):
            config.get("x")


class TestFromFile:
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "flycors.yaml"
        path.write_text("flycors:\n  cors:\n    default_policy_name: api\n")

        config = Config.from_file(path)

        assert config.get("flycors.cors.default_policy_name") == "api"
        assert config.loaded_sources == [str(path)]

    def test_profile_overlay(self, tmp_path: Path):
        base = tmp_path / "flycors.yaml"
        base.write_text("flycors:\n  logging:\n    format: console\n    level:\n      root: INFO\n")
        (tmp_path / "flycors-prod.yaml").write_text("flycors:\n  logging:\n    format: json\n")

        config = Config.from_file(base, active_profiles=["prod"])

        assert config.get("flycors.logging.format") == "json"
        assert config.get("flycors.logging.level.root") == "INFO"

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []


class TestBind:
    def test_bind_cors_properties(self):
        props = Config({"flycors": {"cors": {"default_policy_name": "api"}}}).bind(CORSProperties)
        assert props.default_policy_name == "api"

    def test_bind_uses_defaults(self):
        assert Config({}).bind(CORSProperties).default_policy_name == "__DefaultCorsPolicy"
        assert Config({}).bind(LoggingProperties) == LoggingProperties()

    def test_bind_coerces_env_strings(self, monkeypatch):
        @config_properties(prefix="demo")
        @dataclass
        class Demo:
            size: int = 1
            enabled: bool = False

        monkeypatch.setenv("FLYCORS_DEMO_SIZE", "7")
        monkeypatch.setenv("FLYCORS_DEMO_ENABLED", "yes")

        demo = Config({}).bind(Demo)

        assert demo.size == 7
        assert demo.enabled is True

    def test_bind_undecorated_raises(self):
        @dataclass
        class Plain:
            x: int = 0

        with pytest.raises(ValueError):
            Config({}).bind(Plain)
