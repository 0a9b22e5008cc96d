"""roadledger — city and road infrastructure registry."""

__version__ = "0.1.0"
