"""Interactive simulator of dynamic memory partition allocation strategies."""

__version__ = "0.1.0"