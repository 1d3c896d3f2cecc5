"""Brand theme resolution and CSS delivery for the quinielas platform."""

__version__ = "0.1.0"
