"""Client library for the ICS virtualization management REST API: models, endpoint calls and services."""

__version__ = "0.1.0"