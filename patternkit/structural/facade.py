"""Facade - one call that boots a computer from its subsystems."""

from typing import List, Optional

from patternkit.infrastructure.logging.logger import get_logger

BOOT_ADDRESS = 0x0000
BOOT_SECTOR = 0x001
SECTOR_SIZE = 512

logger = get_logger(__name__)


class CPU:
    def __init__(self, operations: Optional[List[str]] = None):
        self.operations = operations if operations is not None else []

    def freeze(self) -> None:
        self.operations.append("cpu.freeze")

    def jump(self, position: int) -> None:
        self.operations.append(f"cpu.jump({position:#06x})")

    def execute(self) -> None:
        self.operations.append("cpu.execute")


class Memory:
    def __init__(self, operations: Optional[List[str]] = None):
        self.operations = operations if operations is not None else []
        self.contents: dict = {}

    def load(self, position: int, data: bytes) -> None:
        self.contents[position] = data
        self.operations.append(f"memory.load({position:#06x}, {len(data)} bytes)")


class HardDrive:
    def __init__(self, operations: Optional[List[str]] = None):
        self.operations = operations if operations is not None else []

    def read(self, lba: int, size: int) -> bytes:
        self.operations.append(f"hard_drive.read({lba}, {size})")
        return bytes(size)


class ComputerFacade:
    """
    Aggregates the subsystems and sequences them in a fixed order.

    The facade keeps its own ``operations`` record, so the log is the same
    whether the subsystems are defaults, injected, or a mix of both.
    """

    def __init__(
        self,
        cpu: Optional[CPU] = None,
        memory: Optional[Memory] = None,
        hard_drive: Optional[HardDrive] = None,
    ):
        self.operations: List[str] = []
        self.cpu = cpu or CPU()
        self.memory = memory or Memory()
        self.hard_drive = hard_drive or HardDrive()

    def start(self) -> List[str]:
        """
        Boot the computer.

        Returns:
            The subsystem operations performed by this call, in order
        """
        steps: List[str] = []

        self.cpu.freeze()
        steps.append("cpu.freeze")

        boot_data = self.hard_drive.read(BOOT_SECTOR, SECTOR_SIZE)
        steps.append(f"hard_drive.read({BOOT_SECTOR}, {SECTOR_SIZE})")

        self.memory.load(BOOT_ADDRESS, boot_data)
        steps.append(f"memory.load({BOOT_ADDRESS:#06x}, {len(boot_data)} bytes)")

        self.cpu.jump(BOOT_ADDRESS)
        steps.append(f"cpu.jump({BOOT_ADDRESS:#06x})")

        self.cpu.execute()
        steps.append("cpu.execute")

        self.operations.extend(steps)
        logger.debug("Computer started")
        return steps
