"""Savings growth projection: calendar-driven simulator and its JSON API."""

__version__ = "0.1.0"
