"""storeverify: an admin-gated registry of stores and their verification status."""

__version__ = "0.1.0"
