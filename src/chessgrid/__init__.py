"""chessgrid — a chess position model with a PyQt6 grid front end."""

__version__ = "0.1.0"
