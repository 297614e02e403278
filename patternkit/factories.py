"""Factories that pick a concrete implementation from a name."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Shape(ABC):
    """Something that can be drawn."""

    @abstractmethod
    def draw(self) -> str:
        """Describe drawing the shape."""


class Circle(Shape):
    def draw(self) -> str:
        return "Drawing a Circle"


class Square(Shape):
    def draw(self) -> str:
        return "Drawing a Square"


class ShapeFactory:
    """Creates shapes by name; unknown names give ``None``."""

    _SHAPES = {"circle": Circle, "square": Square}

    def create_shape(self, shape_type: str) -> Shape | None:
        shape_class = self._SHAPES.get(shape_type)
        return shape_class() if shape_class else None


class ConsoleLogger:
    """Writes log lines to standard error."""

    def info(self, message: str) -> None:
        print("INFO:", message, file=sys.stderr)

    def error(self, message: str) -> None:
        print("ERROR:", message, file=sys.stderr)


class FileLogger:
    """Appends log lines to a file."""

    def __init__(self, path: str) -> None:
        self._file = open(path, "a", encoding="utf-8")

    def _write(self, line: str) -> None:
        self._file.write(line + "\n")
        self._file.flush()

    def info(self, message: str) -> None:
        self._write("INFO: " + message)

    def error(self, message: str) -> None:
        self._write("ERROR: " + message)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def new_logger(kind: str, path: str = "") -> ConsoleLogger | FileLogger:
    """Create a ``"console"`` or ``"file"`` logger."""
    if kind == "console":
        return ConsoleLogger()
    if kind == "file":
        return FileLogger(path)
    raise ValueError(f"unsupported logger type: {kind}")


class EmailNotifier:
    def send(self, to: str, message: str) -> None:
        print(f"Sending EMAIL to {to}: {message}")


class SMSNotifier:
    def send(self, to: str, message: str) -> None:
        print(f"Sending SMS to {to}: {message}")


def new_notifier(channel: str) -> EmailNotifier | SMSNotifier:
    """Create a notifier for the ``"email"`` or ``"sms"`` channel."""
    if channel == "email":
        return EmailNotifier()
    if channel == "sms":
        return SMSNotifier()
    raise ValueError(f"unsupported channel: {channel}")


class StripeProcessor:
    def charge(self, amount: float) -> None:
        print(f"Charged ${amount:.2f} using Stripe")


class PayPalProcessor:
    def charge(self, amount: float) -> None:
        print(f"Charged ${amount:.2f} using PayPal")


def new_payment_processor(provider: str) -> StripeProcessor | PayPalProcessor:
    """Create a processor for the ``"stripe"`` or ``"paypal"`` provider."""
    if provider == "stripe":
        return StripeProcessor()
    if provider == "paypal":
        return PayPalProcessor()
    raise ValueError(f"unsupported payment provider: {provider}")