"""Chopper Builder API - catalog and configurator backend for custom chopper builds."""

__version__ = "0.1.0"
