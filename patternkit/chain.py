"""Chains of handlers: leave approval and WSGI request middleware."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

_log = logging.getLogger(__name__)


@dataclass
class LeaveRequest:
    employee: str
    days: int
    reason: str = ""


class Approver(ABC):
    """A link in an approval chain."""

    def __init__(self) -> None:
        self.next: Approver | None = None

    def set_next(self, approver: Approver) -> Approver:
        """Link ``approver`` after this one and return it for further linking."""
        self.next = approver
        return approver

    @abstractmethod
    def approve(self, request: LeaveRequest) -> None:
        """Handle the request or pass it on."""

    def pass_to_next(self, request: LeaveRequest) -> None:
        if self.next is not None:
            self.next.approve(request)
        else:
            print("Request reached end of chain; no one to handle it.")


class Manager(Approver):
    def approve(self, request: LeaveRequest) -> None:
        if request.days <= 2:
            print(f"Manager approved {request.days} days leave for {request.employee}")
        else:
            print("Manager passes to Director")
            self.pass_to_next(request)


class Director(Approver):
    def approve(self, request: LeaveRequest) -> None:
        if request.days <= 5:
            print(f"Director approved {request.days} days leave for {request.employee}")
        else:
            print("Director passes to CEO")
            self.pass_to_next(request)


class CEO(Approver):
    def approve(self, request: LeaveRequest) -> None:
        if request.days <= 10:
            print(f"CEO approved {request.days} days leave for {request.employee}")
        else:
            print(f"Leave request for {request.days} days exceeds limit; rejected")


def build_approval_chain() -> Manager:
    """Return a manager linked to a director, linked to a CEO."""
    manager = Manager()
    manager.set_next(Director()).set_next(CEO())
    return manager


StartResponse = Callable[..., Any]
WSGIApp = Callable[[dict, StartResponse], Iterable[bytes]]
# A middleware returns None to let the request through, or a response body
# (having called start_response) to end the chain there.
Middleware = Callable[[dict, StartResponse], "Iterable[bytes] | None"]


class Chain:
    """WSGI application running middleware in order before a final app."""

    def __init__(self, final: WSGIApp, *handlers: Middleware) -> None:
        self.final = final
        self.handlers: tuple[Middleware, ...] = handlers

    def __call__(self, environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        for handler in self.handlers:
            response = handler(environ, start_response)
            if response is not None:
                return response
        return self.final(environ, start_response)


def logging_middleware(environ: dict, start_response: StartResponse) -> None:
    """Log the request and let it through."""
    start = time.perf_counter()
    _log.info("Started %s %s", environ.get("REQUEST_METHOD", ""), environ.get("PATH_INFO", ""))
    _log.info("Completed in %.6fs", time.perf_counter() - start)
    return None


def auth_middleware(
    environ: dict, start_response: StartResponse
) -> list[bytes] | None:
    """Stop requests that lack the expected ``X-Auth-Token`` header."""
    if environ.get("HTTP_X_AUTH_TOKEN") != "secret":
        start_response(
            "403 Forbidden",
            [
                ("Content-Type", "text/plain; charset=utf-8"),
                ("X-Content-Type-Options", "nosniff"),
            ],
        )
        return [b"Forbidden\n"]
    return None


def final_handler(environ: dict, start_response: StartResponse) -> list[bytes]:
    """The application reached by authorised requests."""
    start_response("200 OK", [("Content-Type", "text/plain; charset=utf-8")])
    return [b"Hello, you are authorized!\n"]


def default_chain() -> Chain:
    """The logging and authorisation chain in front of :func:`final_handler`."""
    return Chain(final_handler, logging_middleware, auth_middleware)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sample leave requests through the approval chain."""
    manager = build_approval_chain()
    requests = [
        LeaveRequest("Alice", 1, "Personal"),
        LeaveRequest("Bob", 4, "Vacation"),
        LeaveRequest("Carol", 7, "Medical"),
        LeaveRequest("Dave", 12, "Sabbatical"),
    ]
    for request in requests:
        print(f"\nRequesting {request.days} days leave for {request.employee}:")
        manager.approve(request)
    return 0