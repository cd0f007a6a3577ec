"""Logging, configuration and exceptions."""
