"""Tests for the computer facade."""

from unittest.mock import Mock

from patternkit.structural.facade import (
    BOOT_ADDRESS,
    BOOT_SECTOR,
    SECTOR_SIZE,
    CPU,
    ComputerFacade,
    HardDrive,
    Memory,
)


def test_start_sequences_subsystems_in_fixed_order():
    computer = ComputerFacade()

    assert computer.start() == [
        "cpu.freeze",
        "hard_drive.read(1, 512)",
        "memory.load(0x0000, 512 bytes)",
        "cpu.jump(0x0000)",
        "cpu.execute",
    ]
    assert computer.memory.contents[BOOT_ADDRESS] == bytes(SECTOR_SIZE)


def test_start_returns_only_this_calls_operations():
    computer = ComputerFacade()
    computer.start()

    second = computer.start()

    assert len(second) == 5
    assert len(computer.operations) == 10


def test_facade_with_injected_subsystems():
    calls = Mock()
    cpu = Mock(spec=CPU)
    memory = Mock(spec=Memory)
    hard_drive = Mock(spec=HardDrive)
    hard_drive.read.return_value = b"boot"
    calls.attach_mock(cpu, "cpu")
    calls.attach_mock(memory, "memory")
    calls.attach_mock(hard_drive, "hard_drive")

    ComputerFacade(cpu, memory, hard_drive).start()

    assert [c[0] for c in calls.mock_calls] == [
        "cpu.freeze",
        "hard_drive.read",
        "memory.load",
        "cpu.jump",
        "cpu.execute",
    ]
    hard_drive.read.assert_called_once_with(BOOT_SECTOR, SECTOR_SIZE)
    memory.load.assert_called_once_with(BOOT_ADDRESS, b"boot")


def test_log_is_complete_with_partially_injected_subsystems():
    cpu_record = []
    computer = ComputerFacade(cpu=CPU(cpu_record))

    steps = computer.start()

    assert steps == [
        "cpu.freeze",
        "hard_drive.read(1, 512)",
        "memory.load(0x0000, 512 bytes)",
        "cpu.jump(0x0000)",
        "cpu.execute",
    ]
    assert computer.operations == steps
    assert cpu_record == ["cpu.freeze", "cpu.jump(0x0000)", "cpu.execute"]


def test_log_is_recorded_with_mock_subsystems():
    hard_drive = Mock(spec=HardDrive)
    hard_drive.read.return_value = b"boot"
    computer = ComputerFacade(Mock(spec=CPU), Mock(spec=Memory), hard_drive)

    computer.start()

    assert computer.operations[2] == "memory.load(0x0000, 4 bytes)"
    assert len(computer.operations) == 5
