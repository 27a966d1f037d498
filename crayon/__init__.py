"""Crayon -- UI component scaffolding from framework stubs."""

__version__ = "0.1.0"
