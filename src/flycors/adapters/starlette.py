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
"""Starlette adapter for the CORSRequest port."""

from __future__ import annotations

from starlette.requests import Request

from flycors.cors.request import split_header_values


class StarletteCORSRequest:
    """Reads CORS request headers off a Starlette ``Request``.

    Starlette's ``Headers`` are already case-insensitive. When a header is
    repeated, every occurrence contributes to the comma-separated values.
    """

    __slots__ = ("_request",)

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def method(self) -> str:
        return self._request.method

    def get_header(self, name: str) -> str | None:
        return self._request.headers.get(name)

    def get_comma_separated_values(self, name: str) -> list[str]:
        values: list[str] = []
        for raw in self._request.headers.getlist(name):
            values.extend(split_header_values(raw))
        return values
