import logging

import pytest

from patternkit.chain import (
    CEO,
    Approver,
    Chain,
    Director,
    LeaveRequest,
    Manager,
    auth_middleware,
    build_approval_chain,
    default_chain,
    final_handler,
    logging_middleware,
    main,
)


def _call(app, environ):
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


def test_manager_approves_short_leave(capsys):
    build_approval_chain().approve(LeaveRequest("Alice", 1, "Personal"))
    assert capsys.readouterr().out == "Manager approved 1 days leave for Alice\n"


def test_director_approves_medium_leave(capsys):
    build_approval_chain().approve(LeaveRequest("Bob", 4, "Vacation"))
    assert capsys.readouterr().out.splitlines() == [
        "Manager passes to Director",
        "Director approved 4 days leave for Bob",
    ]


def test_ceo_approves_long_leave(capsys):
    build_approval_chain().approve(LeaveRequest("Carol", 7, "Medical"))
    assert capsys.readouterr().out.splitlines() == [
        "Manager passes to Director",
        "Director passes to CEO",
        "CEO approved 7 days leave for Carol",
    ]


def test_ceo_rejects_excessive_leave(capsys):
    CEO().approve(LeaveRequest("Dave", 12, "Sabbatical"))
    assert capsys.readouterr().out == "Leave request for 12 days exceeds limit; rejected\n"


def test_end_of_chain_message(capsys):
    Director().approve(LeaveRequest("Eve", 7))
    assert capsys.readouterr().out.splitlines() == [
        "Director passes to CEO",
        "Request reached end of chain; no one to handle it.",
    ]


def test_chain_links():
    manager = build_approval_chain()
    assert isinstance(manager, Manager)
    assert isinstance(manager.next, Director)
    assert isinstance(manager.next.next, CEO)
    assert manager.next.next.next is None


def test_approver_is_abstract():
    with pytest.raises(TypeError):
        Approver()


def test_authorized_request_reaches_final():
    environ = {"REQUEST_METHOD": "GET", "PATH_INFO": "/", "HTTP_X_AUTH_TOKEN": "secret"}
    status, _, body = _call(default_chain(), environ)
    assert status == "200 OK"
    assert body == b"Hello, you are authorized!\n"


def test_unauthorized_request_is_forbidden():
    environ = {"REQUEST_METHOD": "GET", "PATH_INFO": "/", "HTTP_X_AUTH_TOKEN": "token"}
    status, headers, body = _call(default_chain(), environ)
    assert status == "403 Forbidden"
    assert body == b"Forbidden\n"
    assert headers["X-Content-Type-Options"] == "nosniff"


def test_auth_middleware_lets_valid_token_through():
    environ = {"HTTP_X_AUTH_TOKEN": "secret"}
    assert auth_middleware(environ, lambda *a: None) is None


def test_chain_stops_at_first_blocking_handler():
    seen = []

    def first(environ, start_response):
        seen.append("first")
        start_response("401 Unauthorized", [])
        return [b"no"]

    def second(environ, start_response):
        seen.append("second")

    status, _, body = _call(Chain(final_handler, first, second), {})
    assert (status, body) == ("401 Unauthorized", b"no")
    assert seen == ["first"]


def test_chain_runs_handlers_in_order():
    seen = []

    def make(name):
        def handler(environ, start_response):
            seen.append(name)

        return handler

    _, _, body = _call(Chain(final_handler, make("a"), make("b")), {})
    assert seen == ["a", "b"]
    assert body == b"Hello, you are authorized!\n"


def test_logging_middleware_logs_and_proceeds(caplog):
    caplog.set_level(logging.INFO, logger="patternkit.chain")
    result = logging_middleware({"REQUEST_METHOD": "GET", "PATH_INFO": "/a"}, lambda *a: None)
    assert result is None
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Started GET /a"
    assert messages[1].startswith("Completed in ")


def test_main_runs_sample_requests(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Requesting 1 days leave for Alice:" in out
    assert "Manager approved 1 days leave for Alice" in out
    assert "Director approved 4 days leave for Bob" in out
    assert "CEO approved 7 days leave for Carol" in out
    assert "Leave request for 12 days exceeds limit; rejected" in out