"""Building blocks for control loops: filters, PID, timers, framing, CRCs and serialization."""

__version__ = "0.1.0"