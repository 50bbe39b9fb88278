from enum import Enum

class ValidatorKind(str, Enum):
    REQUIRED = "REQUIRED"
    LENGTH = "LENGTH"
    PATTERN = "PATTERN"
    NUMERIC = "NUMERIC"
    DIGITS = "DIGITS"
    DATE = "DATE"
    EMAIL = "EMAIL"
    MOBILE = "MOBILE"
    PHONE = "PHONE"
    URL = "URL"
    IPV4 = "IPV4"
    CREDIT_CARD = "CREDIT_CARD"
    ID_CARD = "ID_CARD"
    CUSTOM = "CUSTOM"
