"""lemonctl — lemonade stand order service with a persistent cash drawer."""

__version__ = "0.1.0"
