import enum


class OperandType(enum.StrEnum):
    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "bool"
    DATE = "date"
    DATETIME = "datetime"
