"""Prototype objects that are cloned and customised before use."""

from __future__ import annotations

import sys
import threading
import urllib.request
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

_TOKEN_CHARS = frozenset("!#$%&'*+-.^_`|~")


@dataclass
class JobConfig:
    """Parameters of one ETL run; ``schedule`` is in seconds."""

    name: str = ""
    source_dsn: str = ""
    table: str = ""
    target_dsn: str = ""
    transform: str = ""
    schedule: float = 0.0
    retry_count: int = 0

    def clone(self) -> JobConfig:
        return replace(self)


HOURLY_JOB = JobConfig(
    source_dsn="user:password@tcp(src)/db",
    target_dsn="user:password@tcp(dst)/db",
    transform="normalize_dates",
    schedule=3600.0,
    retry_count=3,
)

DAILY_JOB = JobConfig(
    source_dsn=HOURLY_JOB.source_dsn,
    target_dsn=HOURLY_JOB.target_dsn,
    transform="aggregate_daily",
    schedule=24 * 3600.0,
    retry_count=1,
)


def prepare_jobs(prototypes: Iterable[JobConfig]) -> list[JobConfig]:
    """Clone each prototype and name the copy after its transform."""
    jobs = []
    for proto in prototypes:
        job = proto.clone()
        job.name = f"{proto.transform}_job"
        jobs.append(job)
    return jobs


def run_etl(config: JobConfig) -> None:
    """Report an ETL run for ``config`` on standard error."""
    out = sys.stderr
    print("Running ETL job:", config.name, file=out)
    print("Source:", config.source_dsn, file=out)
    print("Target:", config.target_dsn, file=out)
    print("Transform:", config.transform, file=out)
    print("Retry Count:", config.retry_count, file=out)


def launch_cron(interval: float, task: Callable[[], None]) -> threading.Event:
    """Run ``task`` now and then every ``interval`` seconds in the background.

    Setting the returned event stops the loop.
    """
    stop = threading.Event()

    def loop() -> None:
        while not stop.is_set():
            task()
            stop.wait(interval)

    threading.Thread(target=loop, daemon=True).start()
    return stop


@dataclass(frozen=True)
class _Client:
    timeout: float

    def do(self, request: urllib.request.Request):
        return urllib.request.urlopen(request, timeout=self.timeout or None)


def _is_token(text: str) -> bool:
    return bool(text) and all(
        (ch.isascii() and ch.isalnum()) or ch in _TOKEN_CHARS for ch in text
    )


@dataclass
class RequestPrototype:
    """Template for HTTP requests; ``timeout`` is in seconds."""

    method: str = ""
    url: str = ""
    headers: dict[str, list[str]] = field(default_factory=dict)
    timeout: float = 0.0
    body: bytes = b""

    def clone(self) -> RequestPrototype:
        return replace(
            self,
            headers={key: list(values) for key, values in self.headers.items()},
            body=bytes(self.body),
        )

    def build(self) -> tuple[urllib.request.Request, _Client]:
        """Turn the prototype into a request and a client carrying the timeout."""
        method = self.method or "GET"
        if not _is_token(method):
            raise ValueError(f"invalid method {method!r}")
        headers = {key: ", ".join(values) for key, values in self.headers.items()}
        request = urllib.request.Request(
            self.url, data=bytes(self.body), headers=headers, method=method
        )
        return request, _Client(timeout=self.timeout)