"""Core data for typology: dichotomy table, models and errors."""
