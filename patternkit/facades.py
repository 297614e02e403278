"""Facades that hide several subsystems behind one simple call."""

from __future__ import annotations


class CPU:
    def __init__(self) -> None:
        self.frozen = False
        self.executing = False
        self.address: int | None = None

    def freeze(self) -> None:
        self.frozen = True
        self.executing = False
        print("CPU: freezing registers")

    def jump(self, position: int) -> None:
        self.address = position
        print(f"CPU: jump to address {position:X}")

    def execute(self) -> None:
        self.frozen = False
        self.executing = True
        print("CPU: executing")


class Memory:
    def __init__(self) -> None:
        self.contents: dict[int, bytes] = {}

    def load(self, position: int, data: bytes) -> None:
        self.contents[position] = bytes(data)
        print(f"Memory: loading data to address {position:X}")


class HardDrive:
    def read(self, lba: int, size: int) -> bytes:
        print(f"HardDrive: reading {size} bytes from LBA {lba}")
        return bytes([0xDE, 0xAD, 0xBE, 0xEF])


class ComputerFacade:
    """Boots the computer with one call."""

    BOOT_ADDRESS = 0x1000
    BOOT_SECTOR = 40
    SECTOR_SIZE = 512

    def __init__(self) -> None:
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_drive = HardDrive()

    def start(self) -> None:
        print("Facade: starting computer...")
        self.cpu.freeze()
        data = self.hard_drive.read(self.BOOT_SECTOR, self.SECTOR_SIZE)
        self.memory.load(self.BOOT_ADDRESS, data)
        self.cpu.jump(self.BOOT_ADDRESS)
        self.cpu.execute()


class Amplifier:
    def __init__(self) -> None:
        self.is_on = False
        self.volume = 0

    def on(self) -> None:
        self.is_on = True
        print("Amplifier on")

    def set_volume(self, volume: int) -> None:
        self.volume = volume
        print(f"Amplifier setting volume to {volume}")

    def off(self) -> None:
        self.is_on = False
        print("Amplifier off")


class DVDPlayer:
    def __init__(self) -> None:
        self.is_on = False
        self.playing: str | None = None

    def on(self) -> None:
        self.is_on = True
        print("DVD Player on")

    def play(self, movie: str) -> None:
        self.playing = movie
        print(f'DVD Player playing "{movie}"')

    def stop(self) -> None:
        self.playing = None
        print("DVD Player stopped")

    def off(self) -> None:
        self.is_on = False
        print("DVD Player off")


class Projector:
    def __init__(self) -> None:
        self.is_on = False
        self.widescreen = False

    def on(self) -> None:
        self.is_on = True
        print("Projector on")

    def wide_screen_mode(self) -> None:
        self.widescreen = True
        print("Projector in widescreen mode")

    def off(self) -> None:
        self.is_on = False
        print("Projector off")


class HomeTheaterFacade:
    """Starts and stops a movie across amplifier, projector and DVD player."""

    def __init__(
        self,
        amp: Amplifier | None = None,
        dvd: DVDPlayer | None = None,
        projector: Projector | None = None,
    ) -> None:
        self.amp = amp or Amplifier()
        self.dvd = dvd or DVDPlayer()
        self.projector = projector or Projector()

    def watch_movie(self, movie: str) -> None:
        print("Get ready to watch a movie...")
        self.amp.on()
        self.amp.set_volume(5)
        self.projector.on()
        self.projector.wide_screen_mode()
        self.dvd.on()
        self.dvd.play(movie)

    def end_movie(self) -> None:
        print("Shutting movie theater down...")
        self.dvd.stop()
        self.dvd.off()
        self.projector.off()
        self.amp.off()