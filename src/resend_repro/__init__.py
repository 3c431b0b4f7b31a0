"""Reproduce Resend stripping inline styles from stored templates."""

__version__ = "0.1.0"
