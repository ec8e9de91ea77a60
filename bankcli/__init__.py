"""A console bank for clients, transactions and users, stored in text files."""

__version__ = "0.1.0"