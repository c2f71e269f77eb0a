"""Utility functions and exceptions used throughout codarrays."""
