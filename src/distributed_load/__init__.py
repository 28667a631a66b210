"""Bounded-concurrency distributed load dispatcher."""

__version__ = "0.1.0"
