"""Mini README: Account cells consumed by the bankqueue engine.

Accounts are owned by the caller and shared by reference with every
transaction record that targets them. The dispatcher's ``apply`` step is
the only place that mutates a balance during processing.
"""

from .account import Account, to_decimal

__all__ = ["Account", "to_decimal"]
