"""Proxies that guard access to a service and defer loading an image."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from typing import Protocol


class AccessDenied(PermissionError):
    """Raised when a user is not allowed to use the service."""


class Service(Protocol):
    def perform_action(self, user: str) -> None: ...


class RealService:
    def perform_action(self, user: str) -> None:
        print(f"Action performed for user {user}")


class AuthProxy:
    """Forwards to the service only for allowed users."""

    def __init__(self, service: Service, allowed_users: Iterable[str]) -> None:
        self._service = service
        self._allowed = frozenset(allowed_users)

    def perform_action(self, user: str) -> None:
        if user not in self._allowed:
            raise AccessDenied("access denied for user: " + user)
        self._service.perform_action(user)


class RealImage:
    """An image that is expensive to load; loading happens on construction."""

    def __init__(self, filename: str, load_delay: float = 1.0) -> None:
        print(f"Loading image from disk: {filename}")
        time.sleep(load_delay)
        self.filename = filename
        self.display_count = 0

    def display(self) -> None:
        self.display_count += 1
        print(f"Displaying image: {self.filename}")


class ProxyImage:
    """Stands in for a :class:`RealImage`, loading it on first display only."""

    def __init__(self, filename: str, load_delay: float = 1.0) -> None:
        self.filename = filename
        self._load_delay = load_delay
        self._real_image: RealImage | None = None
        self._lock = threading.Lock()

    def display(self) -> None:
        if self._real_image is None:
            with self._lock:
                if self._real_image is None:
                    self._real_image = RealImage(self.filename, self._load_delay)
        self._real_image.display()