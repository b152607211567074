"""Bucket sort, histogram, random-list and friendly-number experiments."""

__version__ = "0.1.0"