from enum import StrEnum


class OddsOrder(StrEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class HedgeStatus(StrEnum):
    OK = "OK"
    REJECTED = "REJECTED"
