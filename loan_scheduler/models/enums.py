"""Enumeration types for loans and scheduler outcomes."""

from enum import Enum


class LoanStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SETTLED = "SETTLED"


class OutcomeStatus(str, Enum):
    """Result of a scheduler operation.

    Anything other than ``OK`` means the operation was a no-op and no loan
    record was touched.
    """

    OK = "OK"
    EMPTY_REGISTRY = "EMPTY_REGISTRY"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    NO_OP_DELTA = "NO_OP_DELTA"


class LoanKind(str, Enum):
    PERSONAL = "PERSONAL"
    CREDIT_CARD = "CREDIT_CARD"
    VEHICLE = "VEHICLE"
    STUDENT = "STUDENT"
    HOUSING = "HOUSING"
