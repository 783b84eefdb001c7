from enum import Enum


class StrEnum(str, Enum):
    pass


class ListOperation(StrEnum):
    APPEND = "APPEND"
    PREPEND = "PREPEND"
    REPLACE = "REPLACE"
    UNLINK = "UNLINK"
    CLEAR = "CLEAR"
    VISIT_NODE = "VISIT_NODE"


VERBOSE = 5
