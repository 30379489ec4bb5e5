"""Enumerations shared by records and derived results."""

from enum import Enum


class ExpenseCategory(Enum):
    """Expense discriminant. Values match the garage file's `type` field."""

    FUEL = "Fuel"
    SERVICE = "Service"
    OTHER = "Other"


class FuelType(Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"
    CNG = "CNG"
    LPG = "LPG"


class ServiceType(Enum):
    OIL_CHANGE = "Oil Change"
    TIRE_SERVICE = "Tire Service"
    BRAKE_SERVICE = "Brake Service"
    ENGINE_SERVICE = "Engine Service"
    TRANSMISSION_SERVICE = "Transmission Service"
    BATTERY_SERVICE = "Battery Service"
    AC_SERVICE = "AC Service"
    GENERAL_MAINTENANCE = "General Maintenance"
    REPAIR = "Repair"
    INSPECTION = "Inspection"
    OTHER = "Other"


class TrendDirection(Enum):
    """Coarse direction of a price or spending series."""

    RISING = "rising"
    FALLING = "falling"
    FLAT = "flat"
