"""Release automation for single-binary projects shipped through Homebrew."""

__version__ = "0.1.0"
