"""Small everyday helpers: a person record, arithmetic and classifiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    name: str
    age: int

    def modify_name(self, name: str) -> None:
        """Rename the person in place."""
        self.name = name
        print("inside scope: new name", self.name)


def add(a: int, b: int) -> int:
    return a + b


def calculate_sum_and_product(a: int, b: int) -> tuple[int, int]:
    return a + b, a * b


def age_group(age: int) -> str:
    """Describe the life stage for an age."""
    if age >= 18:
        return "you are an adult"
    if age >= 13:
        return "you are a teenager"
    return "you are a child"


def describe_day(day: str) -> str:
    """Describe where a weekday falls in the week."""
    match day:
        case "Monday":
            return "start of the week"
        case "Tuesday" | "Wednesday" | "Thursday":
            return "Midweek"
        case "Friday":
            return "TGIF"
        case _:
            return "its the weekend"