"""Singly and doubly linked lists."""

from .doubly_linked_list import DoublyLinkedList
from .linked_list import LinkedList
from .node import DoublyNode, Node
from .types import Position, TraverseClosure

__all__ = [
    "DoublyLinkedList",
    "DoublyNode",
    "LinkedList",
    "Node",
    "Position",
    "TraverseClosure",
]
