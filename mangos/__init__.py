"""Error codes, message types, pipes, dialers and listeners for Scalability Protocols messaging."""

__version__ = "0.1.0"
__all__ = ["errors", "base", "pipe", "dialer", "listener"]