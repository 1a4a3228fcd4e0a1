from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from exchange_log_core import (
    ContextBuilder,
    ExchangeContext,
    ExchangeStatusError,
    InterceptorOptions,
)
from exchange_log_core.builder import error_message


def test_success_scenario(adapter, exchange, clock, plain_options) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    start = clock.now
    clock.now += 42

    context = builder.build_success_context({"id": 1}, exchange, start, plain_options)

    assert context == ExchangeContext(
        caller_address="10.0.0.1",
        method="GET",
        call_point="/orders",
        response_time=42,
        content_length=8,
        protocol="HTTP/1.1",
        status="200",
        meta=None,
    )


def test_error_scenario_in_color(adapter, exchange, clock, color_options) -> None:
    builder = ContextBuilder(adapter, clock=clock)

    context = builder.build_error_context(
        RuntimeError("boom"), exchange, clock.now, color_options
    )

    assert context.content_length == 4
    assert context.status == "[red]500[/red]"
    assert context.response_time == 0


def test_json_suppresses_color_on_both_paths(adapter, exchange, clock) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    options = InterceptorOptions(color=True, json=True)

    success = builder.build_success_context(None, exchange, clock.now, options)
    error = builder.build_error_context(
        ValueError("x"), exchange, clock.now, options
    )

    assert success.status == "200"
    assert error.status == "500"


@pytest.mark.parametrize("payload", [None, "", b"", {}, []])
def test_empty_payload_yields_zero_content_length(
    adapter, exchange, clock, plain_options, payload
) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    context = builder.build_success_context(payload, exchange, clock.now, plain_options)
    assert context.content_length == 0


def test_empty_error_message(adapter, exchange, clock, plain_options) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    context = builder.build_error_context(
        RuntimeError(), exchange, clock.now, plain_options
    )
    assert context.content_length == 0
    assert context.status == "500"


def test_every_field_is_populated(adapter, exchange, clock, plain_options) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    for context in (
        builder.build_success_context("ok", exchange, clock.now, plain_options),
        builder.build_error_context(
            RuntimeError("no"), exchange, clock.now, plain_options
        ),
    ):
        fields = context.to_dict()
        assert set(fields) == {
            "caller_address",
            "method",
            "call_point",
            "response_time",
            "content_length",
            "protocol",
            "status",
            "meta",
        }
        assert all(v is not None for k, v in fields.items() if k != "meta")
        assert fields["meta"] is None


def test_error_message_is_counted_without_repr_quotes(
    adapter, exchange, clock, plain_options
) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    context = builder.build_error_context(
        KeyError("boom"), exchange, clock.now, plain_options
    )
    assert context.content_length == 4


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (KeyError("boom"), "boom"),
        (RuntimeError("boom"), "boom"),
        (RuntimeError(), ""),
        (OSError(2, "missing"), "[Errno 2] missing"),
        (KeyError(42), "42"),
    ],
)
def test_error_message(error: BaseException, expected: str) -> None:
    assert error_message(error) == expected


def test_unserializable_payload_still_yields_a_record(
    adapter, exchange, clock, plain_options
) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    payload: dict[str, object] = {"id": 1}
    payload["self"] = payload

    context = builder.build_success_context(payload, exchange, clock.now, plain_options)

    assert context.content_length == len(str(payload).encode("utf-8"))
    assert context.status == "200"


def test_error_status_code_is_used(adapter, exchange, clock, plain_options) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    context = builder.build_error_context(
        ExchangeStatusError("not found", 404), exchange, clock.now, plain_options
    )
    assert context.status == "404"
    assert context.content_length == len("not found")


def test_proxied_caller_chain_is_kept(
    make_exchange, adapter, clock, plain_options
) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    exchange = make_exchange(caller=["203.0.113.9", "10.0.0.2"])
    context = builder.build_success_context(None, exchange, clock.now, plain_options)
    assert context.caller_address == ["203.0.113.9", "10.0.0.2"]


def test_idempotent_apart_from_response_time(
    adapter, exchange, clock, plain_options
) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    start = clock.now
    first = builder.build_success_context({"a": 1}, exchange, start, plain_options)
    clock.now += 10
    second = builder.build_success_context({"a": 1}, exchange, start, plain_options)

    assert first.response_time == 0
    assert second.response_time == 10
    assert {**first.to_dict(), "response_time": None} == {
        **second.to_dict(),
        "response_time": None,
    }


def test_negative_elapsed_time_is_clamped(
    adapter, exchange, clock, plain_options, caplog
) -> None:
    caplog.set_level(logging.WARNING, logger="exchange_log.builder")
    builder = ContextBuilder(adapter, clock=clock)

    context = builder.build_success_context(
        None, exchange, clock.now + 5, plain_options
    )

    assert context.response_time == 0
    assert "Clock went backwards by 5ms" in caplog.text


def test_fractional_elapsed_time_is_rounded(adapter, exchange, clock) -> None:
    builder = ContextBuilder(adapter, clock=clock)
    clock.now = 1000.6
    assert builder.get_response_time(1000.0) == 1


def test_meta_receives_payload_and_error(exchange, clock, plain_options) -> None:
    adapter = MagicMock()
    adapter.get_meta.return_value = {"extra": True}
    builder = ContextBuilder(adapter, clock=clock)
    error = RuntimeError("x")

    success = builder.build_success_context("body", exchange, clock.now, plain_options)
    failure = builder.build_error_context(error, exchange, clock.now, plain_options)

    assert success.meta == {"extra": True}
    assert failure.meta == {"extra": True}
    adapter.get_meta.assert_any_call(exchange, "body", plain_options)
    adapter.get_meta.assert_any_call(exchange, error, plain_options)
    adapter.get_status.assert_any_call(exchange, False, None, plain_options)
    adapter.get_status.assert_any_call(exchange, False, error, plain_options)


def test_adapter_failures_propagate(adapter, exchange, clock, plain_options) -> None:
    adapter.get_protocol = MagicMock(side_effect=KeyError("protocol"))
    builder = ContextBuilder(adapter, clock=clock)

    with pytest.raises(KeyError, match="protocol"):
        builder.build_success_context(None, exchange, clock.now, plain_options)


def test_default_clock_is_wall_clock(adapter, exchange, plain_options) -> None:
    builder = ContextBuilder(adapter)
    start = adapter.get_start_time(exchange)
    context = builder.build_success_context(None, exchange, start, plain_options)
    assert context.response_time >= 0
    assert builder.adapter is adapter
