"""Fixed-point decimal numbers with a 96-bit mantissa and a scale of 0 to 28."""

__version__ = "0.1.0"
__all__ = ["core", "comparison", "arithmetic", "conversion", "rounding"]