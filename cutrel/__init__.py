"""cutrel - release automation for Gradle projects."""

__version__ = "0.1.0"
