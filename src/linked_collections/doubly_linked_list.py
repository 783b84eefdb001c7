"""Doubly linked list implementation in Python."""

import logging
from typing import Any, Callable, Iterator, Optional, TypeVar, Union

from .linked_list import LinkedList
from .logging import VERBOSE, ListOperation
from .node import DoublyNode
from .types import Position

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)

DoublyClosure = Callable[[DoublyNode[T], int], Any]
PositionLike = Union[Position, str, None]


class DoublyLinkedList(LinkedList[T]):
    """Doubly linked list

    Every traversal can start from the head (`Position.START`, the default)
    or from the tail (`Position.END`). Indices passed to the closures are
    counted from wherever the traversal started.
    """

    _head: Optional[DoublyNode[T]]  # type: ignore[assignment]
    _tail: Optional[DoublyNode[T]]  # type: ignore[assignment]

    def sanity_check(self) -> None:
        super().sanity_check()
        if not __debug__ or self._head is None:
            return
        assert self._head.previous is None
        current = self._head
        while current.next is not None:
            assert current.next.previous is current
            current = current.next
        count = 1
        assert self._tail is not None
        current = self._tail
        while current.previous is not None:
            assert count < self._length, "More nodes than the stored length"
            assert current.previous.next is current
            current = current.previous
            count += 1
        assert current is self._head
        assert count == self._length

    @property
    def head(self) -> Optional[DoublyNode[T]]:
        return self._head

    @property
    def tail(self) -> Optional[DoublyNode[T]]:
        return self._tail

    def _walk(self, position: PositionLike = None) -> Iterator[DoublyNode[T]]:
        if Position.of(position) is Position.START:
            current = self._head
            while current is not None:
                logger.log(VERBOSE, ListOperation.VISIT_NODE.value)
                yield current
                current = current.next
        else:
            current = self._tail
            while current is not None:
                logger.log(VERBOSE, ListOperation.VISIT_NODE.value)
                yield current
                current = current.previous

    def __reversed__(self) -> Iterator[DoublyNode[T]]:
        return self._walk(Position.END)

    def find(  # type: ignore[override]
        self, closure: DoublyClosure[T], position: PositionLike = None
    ) -> Optional[DoublyNode[T]]:
        """Time complexity: O(n). Return the first node for which the closure
        returns a truthy value, starting from the given position.
        """
        for index, node in enumerate(self._walk(position)):
            if closure(node, index):
                return node
        return None

    def get(self, index: int) -> Optional[DoublyNode[T]]:
        """Time complexity: O(n). Negative indices are not counted from the
        tail; they simply match nothing.
        """
        return self.find(lambda _, i: i == index)

    def set(self, index: int, value: T) -> "DoublyLinkedList[T]":
        """Time complexity: O(n). Replace the node at the index with a new node
        holding the value. Indices at or below zero replace the head; indices
        past the end append the value instead.
        """
        if self._head is None:
            return self.prepend(value)

        if index <= 0:
            old_head = self._head
            node = DoublyNode(value, old_head.next)
            if node.next is None:
                self._tail = node
            else:
                node.next.previous = node
            self._head = node
            old_head.next = None
            logger.log(VERBOSE, ListOperation.REPLACE.value)
            if __debug__:
                self.sanity_check()
            return self

        old_node = self.get(index - 1)
        if old_node is None or old_node.next is None:
            logger.debug("Index %d is out of range, appending %r", index, value)
            return self.append(value)

        current_node = old_node.next
        node = DoublyNode(value, current_node.next, old_node)
        old_node.next = node
        if node.next is None:
            self._tail = node
        else:
            node.next.previous = node
        current_node.next = None
        current_node.previous = None
        logger.log(VERBOSE, ListOperation.REPLACE.value)
        if __debug__:
            self.sanity_check()
        return self

    def delete(self, index: int) -> "DoublyLinkedList[T]":
        """Time complexity: O(n). Unlink the node at the index. Out-of-range
        indices leave the list unchanged.
        """
        if index <= 0:
            if self._head is None or self._head.next is None:
                self._clear()
                return self
            old_head = self._head
            self._head = old_head.next
            self._head.previous = None
            old_head.next = None
            self._length -= 1
            logger.log(VERBOSE, ListOperation.UNLINK.value)
            if __debug__:
                self.sanity_check()
            return self

        old_node = self.get(index - 1)
        current_node = old_node.next if old_node is not None else None
        if old_node is None or current_node is None:
            logger.debug("Index %d is out of range, nothing to delete", index)
            return self

        next_node = current_node.next
        old_node.next = next_node
        if next_node is None:
            self._tail = old_node
        else:
            next_node.previous = old_node
        current_node.next = None
        current_node.previous = None
        self._length -= 1
        logger.log(VERBOSE, ListOperation.UNLINK.value)
        if __debug__:
            self.sanity_check()
        return self

    def append(self, value: T) -> "DoublyLinkedList[T]":
        """Time complexity: O(1)"""
        node = DoublyNode(value, None, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1
        logger.log(VERBOSE, ListOperation.APPEND.value)
        return self

    def prepend(self, value: T) -> "DoublyLinkedList[T]":
        """Time complexity: O(1)"""
        node = DoublyNode(value, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.previous = node
        self._head = node
        self._length += 1
        logger.log(VERBOSE, ListOperation.PREPEND.value)
        return self

    def contains(  # type: ignore[override]
        self, value: T, position: PositionLike = None
    ) -> bool:
        """Time complexity: O(n)"""
        return self.find(lambda node, _: node.value == value, position) is not None

    def map(  # type: ignore[override]
        self, closure: Callable[[DoublyNode[T], int], R], position: PositionLike = None
    ) -> "DoublyLinkedList[R]":
        """Time complexity: O(n). Build a new list from the closure results in
        traversal order, leaving this list untouched.
        """
        mapped: DoublyLinkedList[R] = self.__class__()  # type: ignore[assignment]
        self.traverse(
            lambda node, index: mapped.append(closure(node, index)), position
        )
        return mapped

    def join(  # type: ignore[override]
        self, separator: str, position: PositionLike = None
    ) -> str:
        """Time complexity: O(n)"""
        return separator.join(str(node.value) for node in self._walk(position))

    def traverse(  # type: ignore[override]
        self, closure: DoublyClosure[T], position: PositionLike = None
    ) -> "DoublyLinkedList[T]":
        """Time complexity: O(n)"""
        for index, node in enumerate(self._walk(position)):
            closure(node, index)
        return self

    def for_each(  # type: ignore[override]
        self, closure: DoublyClosure[T], position: PositionLike = None
    ) -> "DoublyLinkedList[T]":
        """Alias of `traverse`."""
        return self.traverse(closure, position)

    def reverse(  # type: ignore[override]
        self, position: PositionLike = None
    ) -> "DoublyLinkedList[T]":
        """Time complexity: O(n). Prepend every visited value to a new list.
        Starting from the head gives the values reversed; starting from the
        tail gives a copy in the original order.
        """
        reversed_list: DoublyLinkedList[T] = self.__class__()
        self.for_each(lambda node, _: reversed_list.prepend(node.value), position)
        return reversed_list

    def to_array(
        self, only_values: bool = False
    ) -> Union[list[DoublyNode[T]], list[T]]:
        """Time complexity: O(n)"""
        if only_values:
            return [node.value for node in self._walk()]
        return list(self._walk())
