"""Decorators that add behaviour around functions, beverages and WSGI apps."""

from __future__ import annotations

import functools
import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")


def cached(fn: Callable[[str], T]) -> Callable[[str], T]:
    """Wrap ``fn`` in a thread-safe cache keyed by its argument.

    Results are cached; raised exceptions are not.
    """
    store: dict[str, T] = {}
    lock = threading.Lock()

    @functools.wraps(fn)
    def wrapper(key: str) -> T:
        with lock:
            if key in store:
                return store[key]
        result = fn(key)
        with lock:
            store[key] = result
        return result

    return wrapper


class RetryError(Exception):
    """Raised when an operation still fails after every attempt."""


def retry(
    operation: Callable[[], T], max_attempts: int, backoff: float
) -> Callable[[], T]:
    """Wrap ``operation`` so it is tried up to ``max_attempts`` times.

    ``backoff`` seconds pass after every failed attempt.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    @functools.wraps(operation)
    def wrapper() -> T:
        last_error: Exception | None = None
        for _ in range(max_attempts):
            try:
                return operation()
            except Exception as err:  # noqa: BLE001 - every failure is retried
                last_error = err
            time.sleep(backoff)
        raise RetryError(
            f"operation failed after retries: {last_error}"
        ) from last_error

    return wrapper


class Beverage(ABC):
    """A drink with a description and a price."""

    @abstractmethod
    def description(self) -> str: ...

    @abstractmethod
    def cost(self) -> float: ...


class Espresso(Beverage):
    def description(self) -> str:
        return "Espresso"

    def cost(self) -> float:
        return 1.50


class CondimentDecorator(Beverage):
    """Wraps a beverage and passes everything through unchanged."""

    def __init__(self, beverage: Beverage) -> None:
        self.beverage = beverage

    def description(self) -> str:
        return self.beverage.description()

    def cost(self) -> float:
        return self.beverage.cost()


class Milk(CondimentDecorator):
    def description(self) -> str:
        return self.beverage.description() + ", Milk"

    def cost(self) -> float:
        return self.beverage.cost() + 0.50


class Sugar(CondimentDecorator):
    def description(self) -> str:
        return self.beverage.description() + ", Sugar"

    def cost(self) -> float:
        return self.beverage.cost() + 0.25


WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]


def hello_app(environ: dict, start_response: Callable[..., Any]) -> list[bytes]:
    """WSGI application that greets every request."""
    start_response("200 OK", [("Content-Type", "text/plain; charset=utf-8")])
    return [b"Hello, World!\n"]


def _request_target(environ: dict) -> str:
    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    query = environ.get("QUERY_STRING", "")
    return f"{path}?{query}" if query else path


def with_logging(app: WSGIApp) -> WSGIApp:
    """Wrap a WSGI application so each request is logged with its duration."""

    @functools.wraps(app)
    def wrapper(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        start = time.perf_counter()
        result = app(environ, start_response)
        elapsed = time.perf_counter() - start
        _log.info(
            "%s %s %.6fs",
            environ.get("REQUEST_METHOD", ""),
            _request_target(environ),
            elapsed,
        )
        return result

    return wrapper