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
"""Request port and the predicates that classify a request's CORS shape.

The evaluator never touches a transport's request type directly; it only
needs the three capabilities declared by :class:`CORSRequest`. Vendor
adapters live under :mod:`flycors.adapters`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from flycors.cors import constants


@runtime_checkable
class CORSRequest(Protocol):
    """What the CORS core reads from an incoming request."""

    @property
    def method(self) -> str: ...

    def get_header(self, name: str) -> str | None:
        """Return the header's value, or ``None`` if the request lacks it."""
        ...

    def get_comma_separated_values(self, name: str) -> list[str]:
        """Return the header's comma-separated items, stripped, empties removed."""
        ...


def split_header_values(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class HeaderMapRequest:
    """In-memory :class:`CORSRequest` over a plain mapping of headers.

    Header names are matched case-insensitively, as HTTP requires.
    """

    __slots__ = ("_method", "_headers")

    def __init__(self, method: str = "GET", headers: Mapping[str, str] | None = None) -> None:
        self._method = method
        self._headers = {k.lower(): v for k, v in (headers or {}).items()}

    @property
    def method(self) -> str:
        return self._method

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name.lower())

    def get_comma_separated_values(self, name: str) -> list[str]:
        return split_header_values(self.get_header(name))

    def __repr__(self) -> str:
        return f"HeaderMapRequest(method={self._method!r}, headers={self._headers!r})"


def is_cors_request(request: CORSRequest) -> bool:
    """A request is cross-origin when it carries an ``Origin`` header."""
    return request.get_header(constants.ORIGIN) is not None


def is_preflight(request: CORSRequest) -> bool:
    """True for an ``OPTIONS`` request announcing an ``Access-Control-Request-Method``.

    The method comparison is ordinal: ``options`` is not a preflight.
    """
    return (
        request.get_header(constants.ORIGIN) is not None
        and request.get_header(constants.ACCESS_CONTROL_REQUEST_METHOD) is not None
        and request.method == constants.PREFLIGHT_HTTP_METHOD
    )
