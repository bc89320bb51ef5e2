"""Core exceptions and enumerations."""
