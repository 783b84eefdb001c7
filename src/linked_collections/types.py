"""Types shared by the list implementations."""

from typing import Callable, TypeVar, Union

from .logging import StrEnum
from .node import Node

T = TypeVar("T")
R = TypeVar("R")


class Position(StrEnum):
    """Where a traversal starts. START walks head to tail, END tail to head."""

    START = "start"
    END = "end"

    @classmethod
    def of(cls, position: Union["Position", str, None]) -> "Position":
        if position is None:
            return cls.START
        return cls(position)


TraverseClosure = Callable[[Node[T], int], R]
