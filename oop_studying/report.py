"""
report.py — Dispatch Table
==========================
Shows, for every class in the sandbox, which class in its MRO actually
answers each method call. Overridden methods resolve to the subclass,
inherited ones to the base, and abstract ones are flagged.
"""

import pandas as pd

from .classes import AbstractTest, AbstractTestChild, Customer, InterfaceTest, Person
from .interfaces import Test

# ── Config ────────────────────────────────────────────────────────────────────
DEFAULT_CLASSES = [Person, Customer, AbstractTest, AbstractTestChild, Test, InterfaceTest]
DEFAULT_METHODS = ["who_am_i", "display_name", "display", "quote", "print_name"]


def resolve(cls: type, method: str):
    """First class in the MRO that defines `method`, or None."""
    for kls in cls.__mro__:
        if method in vars(kls):
            return kls
    return None


def dispatch_table(classes=None, methods=None) -> pd.DataFrame:
    classes = DEFAULT_CLASSES if classes is None else classes
    methods = DEFAULT_METHODS if methods is None else methods

    records = []
    for cls in classes:
        for method in methods:
            owner = resolve(cls, method)
            attr = vars(owner)[method] if owner is not None else None
            records.append({
                "class":       cls.__name__,
                "method":      method,
                "resolved_in": owner.__name__ if owner is not None else None,
                "abstract":    bool(getattr(attr, "__isabstractmethod__", False)),
            })

    return pd.DataFrame(records, columns=["class", "method", "resolved_in", "abstract"])


def print_dispatch_table(classes=None, methods=None):
    df = dispatch_table(classes, methods)
    print("\n--- Dispatch Table ---")
    print(df.fillna("-").to_string(index=False))
    return df
