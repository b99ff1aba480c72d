"""Transfer event model."""

from dataclasses import dataclass

from balance_tracker.domain.models.enums import TransferDirection


@dataclass(frozen=True)
class TransferEvent:
    """
    A native-token transfer seen from the tracked address.

    value is signed in the smallest on-chain unit: positive for IN, negative for OUT.
    """

    value: int
    direction: TransferDirection
    hash: str
    timestamp: int

    def __post_init__(self):
        expected = TransferDirection.IN if self.value > 0 else TransferDirection.OUT
        if self.value == 0 or self.direction != expected:
            raise ValueError(
                f"Transfer {self.hash}: value {self.value} does not match direction {self.direction.value}"
            )
