"""Configuration, logging, clock and venue table."""
