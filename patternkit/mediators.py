"""Mediators that route messages between participants."""

from __future__ import annotations


class ChatRoom:
    """Relays each user's messages to every other registered user."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    def register(self, user: User) -> None:
        self.users[user.name] = user
        user.mediator = self

    def send_message(self, sender: str, message: str) -> None:
        for user in list(self.users.values()):
            if user.name != sender:
                user.receive(sender, message)


class User:
    """A chat participant that talks only through its chat room."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.mediator: ChatRoom | None = None

    def send(self, message: str) -> None:
        if self.mediator is None:
            raise RuntimeError(f"user {self.name} is not in a chat room")
        print(f"[{self.name} ➜ room] {message}")
        self.mediator.send_message(self.name, message)

    def receive(self, sender: str, message: str) -> None:
        print(f"[{self.name} ⬅ {sender}] {message}")


class GameServer:
    """Broadcasts each player's actions to the other players."""

    def __init__(self) -> None:
        self.players: dict[str, Player] = {}

    def join(self, player: Player) -> None:
        self.players[player.name] = player

    def broadcast(self, sender: Player, action: str) -> None:
        for player in list(self.players.values()):
            if player.name != sender.name:
                player.receive(sender.name, action)


class Player:
    """A game participant that announces actions through its server."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.server: GameServer | None = None

    def join(self, server: GameServer) -> None:
        self.server = server
        server.join(self)

    def send_action(self, action: str) -> None:
        if self.server is None:
            raise RuntimeError(f"player {self.name} has not joined a server")
        print(f"[{self.name}] {action}")
        self.server.broadcast(self, action)

    def receive(self, sender_name: str, action: str) -> None:
        print(f"[{self.name} ← {sender_name}] {action}")