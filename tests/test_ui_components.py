import io

import pytest
from rich.console import Console

from cli.ui_components import print_body, print_error, print_headers, print_response
from core.domain.models import ResponseView
from core.errors import JsonFormatError, RequestFailedError


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def test_print_headers_one_per_line():
    console, buffer = _console()
    view = ResponseView(status_code=200, headers=[("server", "nginx"), ("x-a", "1")])

    print_headers(console, view)

    assert buffer.getvalue() == "server: nginx\nx-a: 1\n\n"


def test_print_response_layout():
    console, buffer = _console()
    view = ResponseView(
        status_code=200,
        reason_phrase="OK",
        headers=[("content-type", "application/json")],
        content_type="application/json",
        text='{"a":1}',
    )

    print_response(console, view)

    assert buffer.getvalue() == 'HTTP/1.1 200 OK\n\ncontent-type: application/json\n\n{\n  "a": 1\n}\n'


def test_print_response_invalid_json_after_headers():
    console, buffer = _console()
    view = ResponseView(status_code=200, reason_phrase="OK", content_type="application/json", text="nope")

    with pytest.raises(JsonFormatError):
        print_response(console, view)
    assert buffer.getvalue().startswith("HTTP/1.1 200 OK\n")


def test_print_error():
    console, buffer = _console()
    print_error(console, RequestFailedError("http://x.test/", OSError("down")))
    assert buffer.getvalue() == "error: Request to http://x.test/ failed: down\n"


def test_print_body_writes_non_json_untouched():
    console, buffer = _console()
    view = ResponseView(status_code=200, content_type="text/plain", text="a\tb\r\nc\x0cd [red]x[/red]")

    print_body(console, view)

    assert buffer.getvalue() == "a\tb\r\nc\x0cd [red]x[/red]\n"


def test_print_headers_does_not_wrap_long_values():
    console, buffer = _console()
    value = "v" * 300
    print_headers(console, ResponseView(status_code=200, headers=[("x-long", value)]))
    assert buffer.getvalue() == f"x-long: {value}\n\n"
