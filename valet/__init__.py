"""Valet for Linux — package manager and service plumbing for local development."""

__version__ = "0.1.0"
