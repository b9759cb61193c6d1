"""Pending multi-key sequences and pending confirmations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class Idle:
    """No sequence in progress."""


@dataclass(frozen=True)
class AwaitingSecondKey:
    """A prefix key was pressed and the next key completes or cancels it."""

    prefix: str  # Menu id of the prefix, e.g. "g"


@dataclass(frozen=True)
class AwaitingLeader:
    """The leader menu is open."""

    menu: str = "leader"


PendingSequence = Union[Idle, AwaitingSecondKey, AwaitingLeader]


@dataclass(frozen=True)
class NoConfirmation:
    pass


@dataclass(frozen=True)
class ConfirmDelete:
    """A destructive action waiting for y/n."""

    kind: Literal["list", "database"]
    name: str
    target_id: int | str


PendingConfirmation = Union[NoConfirmation, ConfirmDelete]
