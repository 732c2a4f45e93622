"""Configuration, domain models and errors."""
