"""Foods kept in the refrigerator and their report lines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from foodreport.date import Date


@dataclass
class Food(ABC):
    """A named food with purchase and expiry dates."""

    name: str = " "
    date_purchased: Date = field(default_factory=Date)
    expire_date: Date = field(default_factory=Date)

    @abstractmethod
    def who_am_i(self) -> str:
        """Return the kind of food."""
        return "Food"

    @abstractmethod
    def report_line(self) -> str:
        """Return the line printed for this food in the report."""
        return (
            f"{self.name}"
            f"{self.date_purchased.as_ymd():>20}"
            f"{self.expire_date.as_ymd():>20}"
        )


@dataclass
class Vegetable(Food):
    total_fiber: int = 0
    total_sodium: int = 0

    def who_am_i(self) -> str:
        return "Vegetable"

    def report_line(self) -> str:
        return f"{self.who_am_i()}:{self.name:>16}{self.total_sodium:>15}"


@dataclass
class Fruit(Food):
    sugar_amount: int = 0
    total_c: float = 0.0

    def who_am_i(self) -> str:
        return "Fruit"

    def report_line(self) -> str:
        return f"{self.who_am_i()}:{self.name:>20}{self.sugar_amount:>15}"


@dataclass
class Dairy(Food):
    fat: int = 0
    cholesterol: float = 0.0

    def who_am_i(self) -> str:
        return "Dairy"

    def report_line(self) -> str:
        cholesterol = format(float(self.cholesterol), "g")
        return (
            f"{self.who_am_i()}:{self.name:>20}{self.fat:>15}"
            f"{self.date_purchased.as_ymd():>15}"
            f"{self.expire_date.as_ymd():>15}"
            f"{cholesterol:>10}"
        )