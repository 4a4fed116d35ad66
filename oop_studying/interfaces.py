from abc import ABC, ABCMeta, abstractmethod
from typing import Final

# ── Config ────────────────────────────────────────────────────────────────────
MAX_CUSTOMER_NUMBER = 100
CONSTANTS = frozenset({"MAX_CUSTOMER_NUMBER"})


def _read_only(owner: str, attr: str):
    return TypeError(f"{owner} cannot reassign the constant {attr}")


class ConstantMeta(ABCMeta):
    """ABCMeta that refuses to rebind or delete interface constants on a class."""

    def __setattr__(cls, attr, value):
        if attr in CONSTANTS:
            raise _read_only(cls.__name__, attr)
        super().__setattr__(attr, value)

    def __delattr__(cls, attr):
        if attr in CONSTANTS:
            raise _read_only(cls.__name__, attr)
        super().__delattr__(attr)


# The Interface: only abstract behaviour and constants
class Test(ABC, metaclass=ConstantMeta):
    """Capability contract for anything that can print a name."""

    MAX_CUSTOMER_NUMBER: Final = MAX_CUSTOMER_NUMBER

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        redefined = vars(cls).keys() & CONSTANTS
        if redefined:
            raise TypeError(
                f"{cls.__name__} cannot redefine the constant {', '.join(sorted(redefined))}"
            )

    # Instances must not shadow the constant either
    def __setattr__(self, attr, value):
        if attr in CONSTANTS:
            raise _read_only(type(self).__name__, attr)
        super().__setattr__(attr, value)

    @abstractmethod
    def print_name(self, name: str):
        pass
