"""Distributed transaction client pieces: protocol messages, registration and branch codecs, configuration and logging."""

__version__ = "0.1.0"