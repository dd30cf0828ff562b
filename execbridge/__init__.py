"""Cross-platform command-line construction for exec-style build plugins."""

__version__ = "0.1.0"
