"""Backend template: user registration, JWT login and user CRUD over MongoDB."""

__version__ = "0.1.0"
