"""Emulator for the Melo fantasy console CPU: bus interface, memory banks, CPU and demo command."""

__version__ = "0.1.0"
__all__ = ["addressing", "memory", "cpu", "cli"]