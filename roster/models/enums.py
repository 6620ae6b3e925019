"""Closed value sets for the enum-typed roster fields."""

from enum import Enum


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class Batch(str, Enum):
    """Year classification that replaces gender in the batch schema."""

    FIRST_YEAR = "FIRST_YEAR"
    SECOND_YEAR = "SECOND_YEAR"
    THIRD_YEAR = "THIRD_YEAR"
    FOURTH_YEAR = "FOURTH_YEAR"


class Department(str, Enum):
    AERO = "AERO"
    CE = "CE"
    CIVIL = "CIVIL"
    EC = "EC"
    ELE = "ELE"
    IC = "IC"
    IT = "IT"
    MCA = "MCA"


class ShirtSize(str, Enum):
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"
    XXXL = "XXXL"


class ProjectType(str, Enum):
    HARDWARE = "HARDWARE"
    IOT = "IOT"
    SOFTWARE = "SOFTWARE"


class Wing(str, Enum):
    CEF = "CEF"
    CES = "CES"
    IT = "IT"
    EC = "EC"
    MCA = "MCA"
    ARCH = "ARCH"
