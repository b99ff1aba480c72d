"""Enumerations for domain models."""

from enum import Enum


class TransferDirection(str, Enum):
    """Direction of a transfer relative to the tracked address."""

    IN = "in"
    OUT = "out"
