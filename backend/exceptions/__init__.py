"""
Custom exceptions for the disc golf store API.

Exception Hierarchy:
--------------------
DiscStoreException (base)
├── StorageException
├── CartException
│   ├── CartNotFoundException
│   ├── DiscNotInCartException
│   ├── DiscUnavailableException
│   └── NothingPurchasableException
└── LessonException
    └── InvalidLessonDateException

Usage:
    from exceptions import CartNotFoundException

    raise CartNotFoundException("alice")
"""

from .base import DiscStoreException
from .storage import StorageException
from .cart import (
    CartException,
    CartNotFoundException,
    DiscNotInCartException,
    DiscUnavailableException,
    NothingPurchasableException,
)
from .lesson import LessonException, InvalidLessonDateException

__all__ = [
    "DiscStoreException",
    "StorageException",
    "CartException",
    "CartNotFoundException",
    "DiscNotInCartException",
    "DiscUnavailableException",
    "NothingPurchasableException",
    "LessonException",
    "InvalidLessonDateException",
]
