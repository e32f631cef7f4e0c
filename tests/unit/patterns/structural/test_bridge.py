"""Tests for the remote control bridge."""

from patternkit.structural.bridge import AdvancedRemoteControl, Radio, RemoteControl, Television


class TestRemoteControl:
    """Test the abstraction against different implementations."""

    def test_toggle_power(self):
        tv = Television()
        remote = RemoteControl(tv)

        assert remote.toggle_power() is True
        assert tv.is_enabled()
        assert remote.toggle_power() is False

    def test_volume_is_clamped(self):
        remote = RemoteControl(Television(volume=95))

        assert remote.volume_up() == 100
        assert remote.volume_up() == 100

        remote.device.set_volume(5)
        assert remote.volume_down() == 0

    def test_swapping_device_keeps_interface(self):
        remote = RemoteControl(Television())
        remote.channel_up()

        radio = Radio()
        remote.device = radio

        assert remote.channel_up() == 89
        assert remote.volume_up() == 30
        assert radio.get_channel() == 89

    def test_advanced_remote_mute(self):
        radio = Radio(volume=70)
        remote = AdvancedRemoteControl(radio)

        assert remote.mute() == 0
        assert radio.get_volume() == 0
        assert remote.channel_down() == 87
