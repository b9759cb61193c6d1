"""Interpreter state: screens, pending sequences, key buffer."""

from judo.domains.shell.state.key_buffer import KeyBuffer, NumberModifier
from judo.domains.shell.state.screens import PRIMARY_SCREENS, Screen, ScreenMachine
from judo.domains.shell.state.sequences import (
    AwaitingLeader,
    AwaitingSecondKey,
    ConfirmDelete,
    Idle,
    NoConfirmation,
    PendingConfirmation,
    PendingSequence,
)

__all__ = [
    "PRIMARY_SCREENS",
    "AwaitingLeader",
    "AwaitingSecondKey",
    "ConfirmDelete",
    "Idle",
    "KeyBuffer",
    "NoConfirmation",
    "NumberModifier",
    "PendingConfirmation",
    "PendingSequence",
    "Screen",
    "ScreenMachine",
]
