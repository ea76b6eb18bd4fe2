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
"""Tests for CORSOptions — the named policy store."""

from __future__ import annotations

import pytest

from flycors.config.properties.cors import CORSProperties
from flycors.cors.builder import CORSPolicyBuilder
from flycors.cors.options import DEFAULT_POLICY_NAME, CORSOptions
from flycors.cors.policy import CORSPolicy
from flycors.kernel.exceptions import PolicyNotFoundException


class TestCORSOptionsRegistration:
    def test_add_built_policy(self):
        options = CORSOptions()
        policy = CORSPolicyBuilder("http://a.com").build()

        options.add_policy("api", policy)

        assert options.get_policy("api") is policy

    def test_add_policy_via_builder_callable(self):
        options = CORSOptions()

        options.add_policy("api", lambda b: b.add_origins("http://a.com").allow_any_method())

        policy = options.get_policy("api")
        assert isinstance(policy, CORSPolicy)
        assert policy.origins == ("http://a.com",)
        assert policy.allow_any_method is True

    def test_re_registering_replaces(self):
        options = CORSOptions()
        options.add_policy("api", CORSPolicy(origins=("http://a.com",)))
        options.add_policy("api", CORSPolicy(origins=("http://b.com",)))

        assert options.get_policy("api").origins == ("http://b.com",)
        assert options.policy_names == ["api"]


class TestCORSOptionsDefaultPolicy:
    def test_default_name(self):
        assert CORSOptions().default_policy_name == DEFAULT_POLICY_NAME == "__DefaultCorsPolicy"

    def test_get_policy_without_name_returns_default(self):
        options = CORSOptions()
        options.add_default_policy(lambda b: b.allow_any_origin())

        assert options.get_policy().allow_any_origin is True
        assert options.policy_names == ["__DefaultCorsPolicy"]

    def test_from_properties(self):
        options = CORSOptions.from_properties(CORSProperties(default_policy_name="site"))
        options.add_default_policy(CORSPolicy())

        assert options.default_policy_name == "site"
        assert options.policy_names == ["site"]


class TestCORSOptionsLookupFailure:
    def test_unknown_name_raises_with_context(self):
        options = CORSOptions()
        options.add_policy("api", CORSPolicy())

        with pytest.raises(PolicyNotFoundException) as exc_info:
            options.get_policy("admin")

        assert exc_info.value.code == "CORS_POLICY_404"
        assert exc_info.value.context == {"policy_name": "admin", "available": ["api"]}

    def test_missing_default_raises(self):
        with pytest.raises(PolicyNotFoundException):
            CORSOptions().get_policy()
