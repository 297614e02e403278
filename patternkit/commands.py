"""Command objects: transactional inserts and an undoable remote control."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Protocol


class DBCommand(Protocol):
    def execute(self) -> None: ...

    def rollback(self) -> None: ...


class Command(Protocol):
    def execute(self) -> None: ...

    def undo(self) -> None: ...


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class Database:
    """Stand-in database that reports the statements it would run."""

    def insert(self, table: str, row_id: int, data: str) -> None:
        print(f"INSERT INTO {table} VALUES ({row_id}, {_quote(data)})")

    def delete(self, table: str, row_id: int) -> None:
        print(f"DELETE FROM {table} WHERE id={row_id}")


@dataclass
class InsertCommand:
    """Inserts one row; rolling back deletes it again."""

    db: Database
    table: str
    row_id: int
    data: str

    def execute(self) -> None:
        self.db.insert(self.table, self.row_id, self.data)

    def rollback(self) -> None:
        self.db.delete(self.table, self.row_id)


@dataclass
class TransactionManager:
    """Queues commands and runs them as one transaction."""

    commands: list[DBCommand] = field(default_factory=list)

    def add(self, command: DBCommand) -> None:
        self.commands.append(command)

    def commit(self) -> bool:
        """Execute every command; on the first failure roll everything back.

        Returns whether the transaction was committed.
        """
        for command in self.commands:
            try:
                command.execute()
            except Exception:  # noqa: BLE001 - any failure aborts the transaction
                print("Error executing, rolling back")
                self.rollback()
                return False
        print("Transaction committed")
        return True

    def rollback(self) -> None:
        """Undo every queued command, newest first."""
        for command in reversed(self.commands):
            try:
                command.rollback()
            except Exception:  # noqa: BLE001 - keep undoing the rest
                pass
        print("Transaction rolled back")


class Light:
    """A light that can be switched on and off."""

    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print("Light is ON")

    def off(self) -> None:
        self.is_on = False
        print("Light is OFF")


@dataclass
class LightOnCommand:
    light: Light

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


@dataclass
class LightOffCommand:
    light: Light

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


class RemoteControl:
    """Two-button remote that remembers what it did so it can undo it."""

    def __init__(self) -> None:
        self.on_command: Command | None = None
        self.off_command: Command | None = None
        self.history: list[Command] = []

    def set_commands(self, on: Command, off: Command) -> None:
        self.on_command, self.off_command = on, off

    def _press(self, command: Command | None) -> None:
        if command is None:
            raise RuntimeError("commands not set")
        command.execute()
        self.history.append(command)

    def press_on(self) -> None:
        self._press(self.on_command)

    def press_off(self) -> None:
        self._press(self.off_command)

    def press_undo(self) -> None:
        if not self.history:
            print("Nothing to undo")
            return
        self.history.pop().undo()