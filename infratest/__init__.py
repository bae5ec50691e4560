"""Helpers for automated tests of infrastructure: lists, errors, environment, files, docker-compose and AWS."""

__version__ = "0.1.0"