"""Project tracker backend."""
