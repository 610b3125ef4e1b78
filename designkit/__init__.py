"""Object models for elevator scheduling, library management and cinema seating."""

__version__ = "0.1.0"