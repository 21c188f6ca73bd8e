"""Constants for configuration."""

__all__ = ("TRUE_VALUES",)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}
