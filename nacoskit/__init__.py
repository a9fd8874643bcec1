"""Building blocks for Nacos naming and configuration clients."""

__version__ = "0.1.0"