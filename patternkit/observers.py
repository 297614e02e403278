"""Observers notified by chat rooms, people, stocks and weather stations."""

from __future__ import annotations

from typing import Any, Protocol


class Participant(Protocol):
    def receive(self, sender: str, message: str) -> None: ...


class SimpleChatRoom:
    """Broadcasts messages to every participant except the sender."""

    def __init__(self) -> None:
        self.participants: dict[Participant, None] = {}

    def join(self, participant: Participant) -> None:
        self.participants[participant] = None

    def leave(self, participant: Participant) -> None:
        self.participants.pop(participant, None)

    def broadcast(self, sender: str, message: str) -> None:
        for participant in list(self.participants):
            if isinstance(participant, ChatUser) and participant.name == sender:
                continue
            participant.receive(sender, message)


class ChatUser:
    """A chat participant that prints what it receives."""

    def __init__(self, name: str, room: SimpleChatRoom | None = None) -> None:
        self.name = name
        self.room = room

    def receive(self, sender: str, message: str) -> None:
        print(f"[{self.name}] {sender}: {message}")

    def send(self, message: str) -> None:
        if self.room is None:
            raise RuntimeError(f"user {self.name} is not in a chat room")
        self.room.broadcast(self.name, message)


class PropertyObserver(Protocol):
    def on_change(self, prop: str, old_value: Any, new_value: Any) -> None: ...


class Person:
    """A person whose name and age changes are reported to observers."""

    def __init__(self, name: str, age: int) -> None:
        self._name = name
        self._age = age
        self.observers: list[PropertyObserver] = []

    def register(self, observer: PropertyObserver) -> None:
        self.observers.append(observer)

    def _notify(self, prop: str, old_value: Any, new_value: Any) -> None:
        for observer in list(self.observers):
            observer.on_change(prop, old_value, new_value)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        old, self._name = self._name, value
        self._notify("name", old, value)

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        old, self._age = self._age, value
        self._notify("age", old, value)


class ChangeLogger:
    """Prints every property change it hears about."""

    def on_change(self, prop: str, old_value: Any, new_value: Any) -> None:
        print(f"Property {prop} changed from {old_value} to {new_value}")


class PriceObserver(Protocol):
    def update(self, price: float) -> None: ...


class Stock:
    """A ticker symbol whose price changes are pushed to observers."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        self.price = 0.0
        self.observers: dict[PriceObserver, None] = {}

    def register(self, observer: PriceObserver) -> None:
        self.observers[observer] = None

    def unregister(self, observer: PriceObserver) -> None:
        self.observers.pop(observer, None)

    def notify(self) -> None:
        for observer in list(self.observers):
            observer.update(self.price)

    def set_price(self, price: float) -> None:
        print(f"\n{self.symbol} price changed to {price:.2f}")
        self.price = price
        self.notify()


class ConsoleDisplay:
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, price: float) -> None:
        print(f"[{self.name}] Current Price: {price:.2f}")


class AlertService:
    """Warns when the price rises above a threshold."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold

    def update(self, price: float) -> None:
        if price > self.threshold:
            print(f"[ALERT] Price {price:.2f} exceeded threshold {self.threshold:.2f}!")


class DisplayObserver(Protocol):
    def update(self, temperature: float, humidity: float) -> None: ...


class WeatherStation:
    """Holds the latest measurements and pushes them to displays."""

    def __init__(self) -> None:
        self.observers: dict[DisplayObserver, None] = {}
        self.temperature = 0.0
        self.humidity = 0.0

    def register(self, observer: DisplayObserver) -> None:
        self.observers[observer] = None

    def unregister(self, observer: DisplayObserver) -> None:
        self.observers.pop(observer, None)

    def notify(self) -> None:
        for observer in list(self.observers):
            observer.update(self.temperature, self.humidity)

    def set_measurements(self, temperature: float, humidity: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.notify()


class CurrentConditionsDisplay:
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, temperature: float, humidity: float) -> None:
        print(
            f"[{self.name}] Current conditions: {temperature:.1f}°C, "
            f"{humidity:.1f}% humidity"
        )


class StatisticsDisplay:
    def update(self, temperature: float, humidity: float) -> None:
        print(f"[Stats] Received temp={temperature:.1f}, humidity={humidity:.1f}")