"""Evently - events platform backend with role-based access control."""

__version__ = "0.1.0"
