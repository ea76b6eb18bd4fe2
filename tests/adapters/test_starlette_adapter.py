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
"""Tests for the Starlette CORSRequest adapter."""

from __future__ import annotations

from starlette.requests import Request

from flycors.adapters.starlette import StarletteCORSRequest
from flycors.cors.builder import CORSPolicyBuilder
from flycors.cors.evaluator import PolicyEvaluator
from flycors.cors.request import CORSRequest, is_preflight

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_request(method: str = "GET", headers: list[tuple[str, str]] | None = None) -> Request:
    scope = {
        "type": "http",
        "method": method,
        "path": "/items",
        "query_string": b"",
        "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers or []],
    }
    return Request(scope)


class TestStarletteCORSRequest:
    def test_implements_port(self):
        assert isinstance(StarletteCORSRequest(make_request()), CORSRequest)

    def test_method(self):
        assert StarletteCORSRequest(make_request("OPTIONS")).method == "OPTIONS"

    def test_header_lookup_is_case_insensitive(self):
        adapter = StarletteCORSRequest(make_request(headers=[("Origin", "http://a.com")]))

        assert adapter.get_header("Origin") == "http://a.com"
        assert adapter.get_header("ORIGIN") == "http://a.com"
        assert adapter.get_header("Access-Control-Request-Method") is None

    def test_repeated_header_values_are_merged(self):
        adapter = StarletteCORSRequest(
            make_request(
                headers=[
                    ("Access-Control-Request-Headers", "X-One, X-Two"),
                    ("Access-Control-Request-Headers", "X-Three"),
                ]
            )
        )

        assert adapter.get_comma_separated_values("Access-Control-Request-Headers") == ["X-One", "X-Two", "X-Three"]


class TestStarletteEvaluation:
    def test_preflight_through_adapter(self):
        request = StarletteCORSRequest(
            make_request(
                "OPTIONS",
                [
                    ("Origin", "http://a.com"),
                    ("Access-Control-Request-Method", "PUT"),
                    ("Access-Control-Request-Headers", "X-Trace"),
                ],
            )
        )
        policy = CORSPolicyBuilder("http://a.com").add_methods("PUT").add_headers("X-Trace").build()

        assert is_preflight(request) is True
        assert PolicyEvaluator().evaluate(request, policy).to_response_headers() == {
            "Access-Control-Allow-Origin": "http://a.com",
            "Access-Control-Allow-Methods": "PUT",
            "Access-Control-Allow-Headers": "X-Trace",
        }
