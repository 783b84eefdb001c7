"""Node classes for singly and doubly linked lists."""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    next: Optional["Node[T]"]
    value: T

    def __init__(self, value: T, next: Optional["Node[T]"] = None) -> None:
        # pylint: disable=redefined-builtin
        self.next = next
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class DoublyNode(Node[T]):
    next: Optional["DoublyNode[T]"]
    previous: Optional["DoublyNode[T]"]

    def __init__(
        self,
        value: T,
        next: Optional["DoublyNode[T]"] = None,
        previous: Optional["DoublyNode[T]"] = None,
    ) -> None:
        # pylint: disable=redefined-builtin
        super().__init__(value, next)
        self.previous = previous
