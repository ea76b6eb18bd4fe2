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
"""Wire names, tokens and messages of the CORS protocol."""

from __future__ import annotations

from typing import Final

# Request headers
ORIGIN: Final = "Origin"
ACCESS_CONTROL_REQUEST_METHOD: Final = "Access-Control-Request-Method"
ACCESS_CONTROL_REQUEST_HEADERS: Final = "Access-Control-Request-Headers"

# Response headers
ACCESS_CONTROL_ALLOW_ORIGIN: Final = "Access-Control-Allow-Origin"
ACCESS_CONTROL_ALLOW_CREDENTIALS: Final = "Access-Control-Allow-Credentials"
ACCESS_CONTROL_ALLOW_METHODS: Final = "Access-Control-Allow-Methods"
ACCESS_CONTROL_ALLOW_HEADERS: Final = "Access-Control-Allow-Headers"
ACCESS_CONTROL_EXPOSE_HEADERS: Final = "Access-Control-Expose-Headers"
ACCESS_CONTROL_MAX_AGE: Final = "Access-Control-Max-Age"

ANY_ORIGIN: Final = "*"
PREFLIGHT_HTTP_METHOD: Final = "OPTIONS"

# Values browsers never need to see in an allow/expose directive. Kept
# lower-cased for case-insensitive membership tests.
SIMPLE_METHODS: Final = frozenset({"get", "head", "post"})
SIMPLE_REQUEST_HEADERS: Final = frozenset({"accept", "accept-language", "content-language", "content-type"})
SIMPLE_RESPONSE_HEADERS: Final = frozenset(
    {"cache-control", "content-language", "content-type", "expires", "last-modified", "pragma"}
)

# Validation messages
ORIGIN_NOT_ALLOWED: Final = "Origin not allowed."
ORIGIN_NOT_ALLOWED_FORMAT: Final = "The origin '{origin}' is not allowed."
METHOD_NOT_ALLOWED: Final = "Method not allowed."
HEADERS_NOT_ALLOWED: Final = "Headers not allowed."
PREFLIGHT_MAX_AGE_OUT_OF_RANGE: Final = "PreflightMaxAge must be greater than or equal to 0."
