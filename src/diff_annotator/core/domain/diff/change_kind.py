from enum import StrEnum, auto


class ChangeKind(StrEnum):
    NORMAL = auto()
    ADD = auto()
    DEL = auto()
