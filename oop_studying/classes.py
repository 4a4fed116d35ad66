from abc import ABC, abstractmethod
from typing import Optional, overload

from .interfaces import Test

# ── Config ────────────────────────────────────────────────────────────────────
DEFAULT_NAME = "Unknown"
DEFAULT_CUSTOMER_ID = "C000"
QUOTE = "Talk is cheap. Show me the code."


# Base Class #
class Person:
    """Represents the root of the hierarchy."""
    def __init__(self, name=DEFAULT_NAME):
        self.name = name

    def who_am_i(self):
        print("Human")

    # Two call signatures, one implementation picked by argument count
    @overload
    @staticmethod
    def display_name(first_name: str) -> None: ...

    @overload
    @staticmethod
    def display_name(first_name: str, last_name: str) -> None: ...

    @staticmethod
    def display_name(first_name: str, last_name: Optional[str] = None) -> None:
        if not first_name or not first_name.strip():
            raise ValueError("A first name is required.")

        # A blank last name counts as the one-argument form
        if last_name is None or not last_name.strip():
            print(f"Name: {first_name}")
        else:
            print(f"Name: {first_name} {last_name}")


# Child Class of Person #
class Customer(Person):
    """Inherits from Person. Adds a customer ID and its own display()."""
    def __init__(self, name=DEFAULT_NAME, customer_id=DEFAULT_CUSTOMER_ID):
        super().__init__(name)
        self.customer_id = customer_id

    # This overrides the Person.who_am_i() method
    def who_am_i(self):
        print("Customer")

    # Only exists on Customer, not reachable through the Person interface
    def display(self):
        print(f"Customer: {self.name} | Customer ID: {self.customer_id}")


# Abstract Class #
class AbstractTest(Person, ABC):
    """A Person that cannot be built until quote() is implemented."""

    @abstractmethod
    def quote(self):
        pass


class AbstractTestChild(AbstractTest):
    """Concrete child of AbstractTest."""

    def quote(self):
        print(QUOTE)

    def who_am_i(self):
        print("AbstractTestChild")


# Concrete Implementation of the Test interface #
class InterfaceTest(Test):
    def print_name(self, name: str):
        print(f"Hello, {name}!")
