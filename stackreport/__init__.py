"""Stackreport: post infrastructure command reports as pull request comments."""

__version__ = "0.1.0"
