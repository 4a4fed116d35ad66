from .classes import AbstractTestChild, Customer, InterfaceTest, Person
from .interfaces import Test


class Tester:
    """Holder for the demonstrations. Each one prints and returns what it built."""

    @staticmethod
    def test_scope():
        person: Person = Customer()

        # display() belongs to Customer only; a plain Person does not have it
        try:
            Person().display()
        except AttributeError:
            print("display() is not available on Person")

        if isinstance(person, Customer):
            person.display()
        return person

    @staticmethod
    def test_interface():
        test: Test = InterfaceTest()
        test.print_name("Peter")
        print(Test.MAX_CUSTOMER_NUMBER)
        return test

    @staticmethod
    def test_overriding():
        # Person.who_am_i() prints Human while Customer's prints Customer
        person: Person = Customer()
        person.who_am_i()
        return person

    @staticmethod
    def test_overloading_function():
        person: Person = Customer()
        Person.display_name("Peter", "Emil")
        return person

    @staticmethod
    def test_abstract_class_inheritance():
        person: Person = AbstractTestChild()
        person.who_am_i()
        abstract_test_child = AbstractTestChild()
        abstract_test_child.quote()
        return abstract_test_child

    @staticmethod
    def get_demo(name: str):
        return DEMOS[demo_key(name)]


def demo_key(name: str) -> str:
    """Normalized DEMOS key for `name`; raises ValueError if there is none."""
    key = name.lower().strip()

    if key not in DEMOS:
        raise ValueError(f"Unknown demo: {key}")
    return key


DEMOS = {
    "overriding": Tester.test_overriding,
    "overloading": Tester.test_overloading_function,
    "abstract": Tester.test_abstract_class_inheritance,
    "interface": Tester.test_interface,
    "scope": Tester.test_scope,
}
