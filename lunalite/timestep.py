"""Frame time span."""

from dataclasses import dataclass

__all__ = ["Timestep"]


@dataclass(frozen=True)
class Timestep:
    """A time span in seconds, usually the time between two frames."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    @property
    def seconds(self) -> float:
        return float(self.time)

    @property
    def milliseconds(self) -> float:
        return float(self.time) * 1000.0