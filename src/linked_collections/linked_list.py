"""Singly linked list implementation in Python."""

import logging
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
    Union,
)
import warnings

from .logging import VERBOSE, ListOperation
from .node import Node
from .types import TraverseClosure

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class LinkedList(Generic[T], Iterable[Node[T]]):
    """Singly linked list.

    Positional operations never raise for out-of-range indices: `get` returns
    None, `delete` does nothing and `set` falls back to `append`.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._length = 0
        if values is not None:
            for value in values:
                self.append(value)

    def sanity_check(self) -> None:
        """Check if the linked list is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        if self._head is None:
            assert self._tail is None
            assert self._length == 0
            return
        assert self._tail is not None
        assert self._tail.next is None
        count = 1
        current = self._head
        while current.next is not None:
            assert count < self._length, "More nodes than the stored length"
            current = current.next
            count += 1
        assert current is self._tail
        assert count == self._length

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        return self._tail

    def _walk(self) -> Iterator[Node[T]]:
        current = self._head
        while current is not None:
            logger.log(VERBOSE, ListOperation.VISIT_NODE.value)
            yield current
            current = current.next

    def __iter__(self) -> Iterator[Node[T]]:
        return self._walk()

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return f"{self.__class__.__name__}[{self.join(', ')}]"

    def __repr__(self) -> str:
        return str(self)

    def __copy__(self) -> "LinkedList[T]":
        new: LinkedList[T] = self.__class__()
        for node in self:
            new.append(node.value)
        return new

    def size(self) -> int:
        """Time complexity: O(1)"""
        return self._length

    def is_empty(self) -> bool:
        return self._head is None

    def find(self, closure: TraverseClosure[T, Any]) -> Optional[Node[T]]:
        """Time complexity: O(n). Return the first node for which the closure
        returns a truthy value. The closure receives the node and its index.
        """
        for index, node in enumerate(self._walk()):
            if closure(node, index):
                return node
        return None

    def get(self, index: int) -> Optional[Node[T]]:
        """Time complexity: O(n)"""
        return self.find(lambda _, i: i == index)

    def _clear(self) -> None:
        logger.log(VERBOSE, ListOperation.CLEAR.value)
        self._head = None
        self._tail = None
        self._length = 0

    def set(self, index: int, value: T) -> "LinkedList[T]":
        """Time complexity: O(n). Replace the node at the index with a new node
        holding the value. Indices past the end append the value instead.
        """
        if self._head is None:
            return self.prepend(value)

        if index <= 0:
            old_head = self._head
            node = Node(value, old_head.next)
            if node.next is None:
                self._tail = node
            self._head = node
            old_head.next = None
            logger.log(VERBOSE, ListOperation.REPLACE.value)
            if __debug__:
                LinkedList.sanity_check(self)
            return self

        old_node = self.get(index - 1)
        if old_node is None or old_node.next is None:
            logger.debug("Index %d is out of range, appending %r", index, value)
            return self.append(value)

        current_node = old_node.next
        node = Node(value, current_node.next)
        old_node.next = node
        if node.next is None:
            self._tail = node
        current_node.next = None
        logger.log(VERBOSE, ListOperation.REPLACE.value)
        if __debug__:
            LinkedList.sanity_check(self)
        return self

    def delete(self, index: int) -> "LinkedList[T]":
        """Time complexity: O(n). Unlink the node at the index. Out-of-range
        indices leave the list unchanged.
        """
        if index <= 0:
            if self._head is None or self._head.next is None:
                self._clear()
                return self
            old_head = self._head
            self._head = old_head.next
            old_head.next = None
            self._length -= 1
            logger.log(VERBOSE, ListOperation.UNLINK.value)
            if __debug__:
                LinkedList.sanity_check(self)
            return self

        old_node = self.get(index - 1)
        current_node = old_node.next if old_node is not None else None
        if old_node is None or current_node is None:
            logger.debug("Index %d is out of range, nothing to delete", index)
            return self

        old_node.next = current_node.next
        current_node.next = None
        self._length -= 1
        if old_node.next is None:
            self._tail = old_node
        logger.log(VERBOSE, ListOperation.UNLINK.value)
        if __debug__:
            LinkedList.sanity_check(self)
        return self

    def append(self, value: T) -> "LinkedList[T]":
        """Time complexity: O(1)"""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1
        logger.log(VERBOSE, ListOperation.APPEND.value)
        return self

    def prepend(self, value: T) -> "LinkedList[T]":
        """Time complexity: O(1)"""
        node = Node(value, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._length += 1
        logger.log(VERBOSE, ListOperation.PREPEND.value)
        return self

    def contains(self, value: T) -> bool:
        """Time complexity: O(n)"""
        return self.find(lambda node, _: node.value == value) is not None

    def map(self, closure: TraverseClosure[T, R]) -> "LinkedList[R]":
        """Time complexity: O(n). Build a new list from the closure results,
        leaving this list untouched. Use `traverse` to modify values in place.
        """
        mapped: LinkedList[R] = self.__class__()  # type: ignore[assignment]
        self.traverse(lambda node, index: mapped.append(closure(node, index)))
        return mapped

    def join(self, separator: str) -> str:
        """Time complexity: O(n)"""
        return separator.join(str(node.value) for node in self._walk())

    def traverse(self, closure: TraverseClosure[T, Any]) -> "LinkedList[T]":
        """Time complexity: O(n)"""
        for index, node in enumerate(self._walk()):
            closure(node, index)
        return self

    def for_each(self, closure: TraverseClosure[T, Any]) -> "LinkedList[T]":
        """Alias of `traverse`."""
        return self.traverse(closure)

    def reverse(self) -> "LinkedList[T]":
        """Time complexity: O(n). Return a new list with the values reversed."""
        reversed_list: LinkedList[T] = self.__class__()
        self.for_each(lambda node, _: reversed_list.prepend(node.value))
        return reversed_list

    def to_array(self, only_values: bool = False) -> Union[list[Node[T]], list[T]]:
        """Time complexity: O(n)"""
        if only_values:
            return [node.value for node in self._walk()]
        return list(self._walk())
