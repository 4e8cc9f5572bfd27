import enum


class OperationType(enum.IntEnum):
    CREATE = 1
    UPDATE = 2
