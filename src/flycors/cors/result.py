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
"""EvaluationResult — the decision produced for one request against one policy."""

from __future__ import annotations

from collections.abc import Iterable

from flycors.cors import constants
from flycors.cors.policy import check_max_age


def _non_simple(values: Iterable[str], simple: frozenset[str]) -> list[str]:
    return [v for v in values if v.lower() not in simple]


def _put_joined(headers: dict[str, str], name: str, values: list[str]) -> None:
    joined = ",".join(values)
    if joined:
        headers[name] = joined


class EvaluationResult:
    """Outcome of :meth:`PolicyEvaluator.evaluate`.

    The evaluator fills the fields in as each check passes; a failed check
    appends to :attr:`error_messages` and evaluation stops. Callers should
    only attach :meth:`to_response_headers` to a response when
    :attr:`is_valid` is true. The result carries no HTTP status.
    """

    def __init__(self) -> None:
        self.error_messages: list[str] = []
        self.allowed_origin: str | None = None
        self.supports_credentials: bool = False
        self.allowed_methods: list[str] = []
        self.allowed_headers: list[str] = []
        self.allowed_exposed_headers: list[str] = []
        self._preflight_max_age: int | None = None

    @property
    def is_valid(self) -> bool:
        return not self.error_messages

    @property
    def preflight_max_age(self) -> int | None:
        """Seconds the preflight response may be cached by the client."""
        return self._preflight_max_age

    @preflight_max_age.setter
    def preflight_max_age(self, value: int | None) -> None:
        self._preflight_max_age = check_max_age(value)

    def to_response_headers(self) -> dict[str, str]:
        """Project the decision onto CORS response headers.

        Simple methods and simple request/response headers are left out of
        the allow/expose directives; a directive whose list becomes empty is
        omitted entirely.
        """
        headers: dict[str, str] = {}

        if self.allowed_origin is not None:
            headers[constants.ACCESS_CONTROL_ALLOW_ORIGIN] = self.allowed_origin

        if self.supports_credentials:
            headers[constants.ACCESS_CONTROL_ALLOW_CREDENTIALS] = "true"

        if self.allowed_methods:
            _put_joined(
                headers,
                constants.ACCESS_CONTROL_ALLOW_METHODS,
                _non_simple(self.allowed_methods, constants.SIMPLE_METHODS),
            )

        if self.allowed_headers:
            _put_joined(
                headers,
                constants.ACCESS_CONTROL_ALLOW_HEADERS,
                _non_simple(self.allowed_headers, constants.SIMPLE_REQUEST_HEADERS),
            )

        if self.allowed_exposed_headers:
            _put_joined(
                headers,
                constants.ACCESS_CONTROL_EXPOSE_HEADERS,
                _non_simple(self.allowed_exposed_headers, constants.SIMPLE_RESPONSE_HEADERS),
            )

        if self._preflight_max_age is not None:
            headers[constants.ACCESS_CONTROL_MAX_AGE] = str(self._preflight_max_age)

        return headers

    def __str__(self) -> str:
        max_age = "null" if self._preflight_max_age is None else str(self._preflight_max_age)
        return (
            f"IsValid: {self.is_valid}, "
            f"AllowCredentials: {self.supports_credentials}, "
            f"PreflightMaxAge: {max_age}, "
            f"AllowOrigin: {self.allowed_origin or ''}, "
            f"AllowExposedHeaders: {{{','.join(self.allowed_exposed_headers)}}}, "
            f"AllowHeaders: {{{','.join(self.allowed_headers)}}}, "
            f"AllowMethods: {{{','.join(self.allowed_methods)}}}, "
            f"ErrorMessages: {{{','.join(self.error_messages)}}}"
        )

    def __repr__(self) -> str:
        return f"<EvaluationResult {self}>"
