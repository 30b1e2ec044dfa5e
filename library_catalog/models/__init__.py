"""Domain models"""
from .book import Book, BookCondition, BookCreate, BookPatch

__all__ = ["Book", "BookCondition", "BookCreate", "BookPatch"]
