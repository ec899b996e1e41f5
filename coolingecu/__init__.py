"""Simulated engine cooling ECU: drivers, communication stack, diagnostics and control components."""

__version__ = "0.1.0"