import pytest

from patternkit.commands import (
    Database,
    InsertCommand,
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
    TransactionManager,
)


class _FailingCommand:
    def execute(self):
        raise RuntimeError("boom")

    def rollback(self):
        pass


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_insert_prints_statement(capsys):
    Database().insert("users", 1, "Alice")
    assert _lines(capsys) == ['INSERT INTO users VALUES (1, "Alice")']


def test_delete_prints_statement(capsys):
    Database().delete("users", 2)
    assert _lines(capsys) == ["DELETE FROM users WHERE id=2"]


def test_commit_runs_all_commands(capsys):
    db = Database()
    tm = TransactionManager()
    tm.add(InsertCommand(db, "users", 1, "Alice"))
    tm.add(InsertCommand(db, "users", 2, "Bob"))
    assert tm.commit() is True
    assert _lines(capsys) == [
        'INSERT INTO users VALUES (1, "Alice")',
        'INSERT INTO users VALUES (2, "Bob")',
        "Transaction committed",
    ]


def test_failure_rolls_back_in_reverse_order(capsys):
    db = Database()
    tm = TransactionManager()
    tm.add(InsertCommand(db, "users", 1, "Alice"))
    tm.add(_FailingCommand())
    tm.add(InsertCommand(db, "users", 3, "Carol"))
    assert tm.commit() is False
    assert _lines(capsys) == [
        'INSERT INTO users VALUES (1, "Alice")',
        "Error executing, rolling back",
        "DELETE FROM users WHERE id=3",
        "DELETE FROM users WHERE id=1",
        "Transaction rolled back",
    ]


def test_remote_control_undo_sequence(capsys):
    light = Light()
    remote = RemoteControl()
    remote.set_commands(LightOnCommand(light), LightOffCommand(light))
    remote.press_on()
    assert light.is_on is True
    remote.press_off()
    assert light.is_on is False
    remote.press_undo()
    assert light.is_on is True
    remote.press_undo()
    assert light.is_on is False
    assert _lines(capsys) == ["Light is ON", "Light is OFF", "Light is ON", "Light is OFF"]


def test_undo_with_empty_history(capsys):
    remote = RemoteControl()
    remote.press_undo()
    assert _lines(capsys) == ["Nothing to undo"]


def test_pressing_without_commands_raises():
    with pytest.raises(RuntimeError):
        RemoteControl().press_on()