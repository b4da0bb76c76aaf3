"""Stellar batch tools: balance reports, test account creation, payments."""

__version__ = "0.1.0"
