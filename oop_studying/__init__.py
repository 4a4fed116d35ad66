from .classes import AbstractTest, AbstractTestChild, Customer, InterfaceTest, Person
from .interfaces import MAX_CUSTOMER_NUMBER, Test
from .tester import DEMOS, Tester

__all__ = [
    "AbstractTest",
    "AbstractTestChild",
    "Customer",
    "InterfaceTest",
    "Person",
    "Test",
    "MAX_CUSTOMER_NUMBER",
    "Tester",
    "DEMOS",
]
