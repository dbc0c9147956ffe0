"""semcommit - AI generated semantic commits for your working tree changes."""

__version__ = "0.1.0"
