"""Adapters that put one interface in front of differing implementations."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

import yaml


class UnsupportedFormatError(ValueError):
    """Raised when a configuration file has an extension no loader handles."""


class JSONLoader:
    """Decodes JSON documents."""

    def decode(self, data: bytes | str) -> Any:
        return json.loads(data)


class YAMLLoader:
    """Decodes YAML documents."""

    def decode(self, data: bytes | str) -> Any:
        return yaml.safe_load(data)


class FileConfigAdapter:
    """Loads a configuration file with the decoder its extension calls for."""

    def __init__(self) -> None:
        self._json_loader = JSONLoader()
        self._yaml_loader = YAMLLoader()

    def load(self, path: str) -> Any:
        """Read ``path`` and return its decoded contents.

        The format is chosen from the last five characters of the path.
        """
        with open(path, "rb") as handle:
            data = handle.read()
        ext = path[-5:]
        if ext == ".json":
            return self._json_loader.decode(data)
        if ext in (".yaml", ".yml"):
            return self._yaml_loader.decode(data)
        raise UnsupportedFormatError(f"unsupported config format: {path}")


@dataclass
class AppConfig:
    """Application settings read from a configuration file."""

    port: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> AppConfig:
        data = data or {}
        return cls(port=int(data.get("port", 0)))


class VLCPlayer:
    """Plays vlc files; each method returns whether it played the file."""

    def play_vlc(self, file_name: str) -> bool:
        print("Playing vlc file. Name:", file_name)
        return True

    def play_mp4(self, file_name: str) -> bool:
        return False


class MP4Player:
    """Plays mp4 files; each method returns whether it played the file."""

    def play_vlc(self, file_name: str) -> bool:
        return False

    def play_mp4(self, file_name: str) -> bool:
        print("Playing mp4 file. Name:", file_name)
        return True


class _AdvancedPlayer(Protocol):
    def play_vlc(self, file_name: str) -> bool: ...

    def play_mp4(self, file_name: str) -> bool: ...


class MediaAdapter:
    """Lets the simple audio player drive the advanced players."""

    _PLAYERS = {"vlc": VLCPlayer, "mp4": MP4Player}

    def __init__(self, audio_type: str) -> None:
        player_class = self._PLAYERS.get(audio_type)
        self.advanced_player: _AdvancedPlayer | None = (
            player_class() if player_class else None
        )

    def play(self, audio_type: str, file_name: str) -> None:
        if self.advanced_player is None:
            return
        if audio_type == "vlc":
            self.advanced_player.play_vlc(file_name)
        elif audio_type == "mp4":
            self.advanced_player.play_mp4(file_name)


class AudioPlayer:
    """Plays mp3 itself and hands vlc and mp4 to a media adapter."""

    def __init__(self) -> None:
        self.adapter: MediaAdapter | None = None

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "mp3":
            print("Playing mp3 file. Name:", file_name)
        elif audio_type in ("vlc", "mp4"):
            self.adapter = MediaAdapter(audio_type)
            self.adapter.play(audio_type, file_name)
        else:
            print("Invalid media. ", audio_type, " format not supported")


class StripeSDK:
    def charge_cents(self, cents: int) -> None:
        print(f"Stripe: charged {cents} cents")


class PayPalSDK:
    def send_payment(self, dollars: float) -> None:
        print(f"PayPal: sent payment of ${dollars:.2f}")


class StripeAdapter:
    """Takes dollar amounts and charges them through Stripe in cents."""

    def __init__(self, stripe: StripeSDK) -> None:
        self._stripe = stripe

    def pay(self, amount: float) -> None:
        self._stripe.charge_cents(int(amount * 100))


class PayPalAdapter:
    """Takes dollar amounts and sends them through PayPal."""

    def __init__(self, paypal: PayPalSDK) -> None:
        self._paypal = paypal

    def pay(self, amount: float) -> None:
        self._paypal.send_payment(amount)


def process_payment(processor: Any, amount: float) -> None:
    """Pay ``amount`` with ``processor``, reporting a failure instead of raising."""
    try:
        processor.pay(amount)
    except Exception as err:  # noqa: BLE001 - any payment failure is reported
        print("Payment failed:", err)