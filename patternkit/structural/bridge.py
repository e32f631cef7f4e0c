"""Bridge - remote control abstractions over interchangeable devices."""

from abc import ABC, abstractmethod

MIN_VOLUME = 0
MAX_VOLUME = 100


class Device(ABC):
    """Implementation side of the bridge."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def enable(self) -> None:
        pass

    @abstractmethod
    def disable(self) -> None:
        pass

    @abstractmethod
    def get_volume(self) -> int:
        pass

    @abstractmethod
    def set_volume(self, volume: int) -> None:
        pass

    @abstractmethod
    def get_channel(self) -> int:
        pass

    @abstractmethod
    def set_channel(self, channel: int) -> None:
        pass


class _BaseDevice(Device):
    """Shared state handling for concrete devices."""

    name = "device"

    def __init__(self, volume: int = 30, channel: int = 1):
        self._on = False
        self._volume = _clamp(volume)
        self._channel = channel

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True

    def disable(self) -> None:
        self._on = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int) -> None:
        self._volume = _clamp(volume)

    def get_channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int) -> None:
        self._channel = channel

    def __repr__(self) -> str:
        state = "on" if self._on else "off"
        return f"{type(self).__name__}({state}, volume={self._volume}, channel={self._channel})"


class Television(_BaseDevice):
    name = "tv"


class Radio(_BaseDevice):
    name = "radio"

    def __init__(self, volume: int = 20, channel: int = 88):
        super().__init__(volume, channel)


class RemoteControl:
    """Abstraction side of the bridge; works with any Device."""

    VOLUME_STEP = 10

    def __init__(self, device: Device):
        self._device = device

    @property
    def device(self) -> Device:
        return self._device

    @device.setter
    def device(self, device: Device) -> None:
        self._device = device

    def toggle_power(self) -> bool:
        """Flip the device power and return the new state."""
        if self._device.is_enabled():
            self._device.disable()
        else:
            self._device.enable()
        return self._device.is_enabled()

    def volume_up(self) -> int:
        self._device.set_volume(self._device.get_volume() + self.VOLUME_STEP)
        return self._device.get_volume()

    def volume_down(self) -> int:
        self._device.set_volume(self._device.get_volume() - self.VOLUME_STEP)
        return self._device.get_volume()

    def channel_up(self) -> int:
        self._device.set_channel(self._device.get_channel() + 1)
        return self._device.get_channel()

    def channel_down(self) -> int:
        self._device.set_channel(self._device.get_channel() - 1)
        return self._device.get_channel()


class AdvancedRemoteControl(RemoteControl):
    """Refined abstraction adding mute."""

    def mute(self) -> int:
        self._device.set_volume(MIN_VOLUME)
        return self._device.get_volume()


def _clamp(volume: int) -> int:
    return max(MIN_VOLUME, min(MAX_VOLUME, volume))
