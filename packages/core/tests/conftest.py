"""Shared fixtures: an in-memory exchange, its adapter and a fixed clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from exchange_log_core import AbstractExchangeAdapter, InterceptorOptions


@dataclass
class FakeExchange:
    caller: str | list[str] = "10.0.0.1"
    method: str = "GET"
    path: str = "/orders"
    protocol: str = "HTTP/1.1"
    slots: dict[str, str] = field(default_factory=dict)


class FakeAdapter(AbstractExchangeAdapter):
    """Reads everything straight off a :class:`FakeExchange`."""

    def get_caller_address(self, exchange: FakeExchange, options: Any) -> Any:
        return exchange.caller

    def get_method(self, exchange: FakeExchange, options: Any) -> str:
        return exchange.method

    def get_call_point(self, exchange: FakeExchange, options: Any) -> str:
        return exchange.path

    def get_protocol(self, exchange: FakeExchange, options: Any) -> str:
        return exchange.protocol

    def set_request_id(self, exchange: FakeExchange, request_id: str) -> None:
        exchange.slots["request_id"] = request_id

    def get_request_id(self, exchange: FakeExchange) -> str:
        return exchange.slots.get("request_id", "")


class FixedClock:
    """Clock returning a settable epoch-millisecond value."""

    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def plain_options() -> InterceptorOptions:
    return InterceptorOptions(color=False, json=False)


@pytest.fixture
def color_options() -> InterceptorOptions:
    return InterceptorOptions(color=True, json=False)


@pytest.fixture
def make_exchange() -> type[FakeExchange]:
    return FakeExchange
