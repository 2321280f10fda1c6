"""Club rating and squad formation tooling for football recruitment."""

__version__ = "0.1.0"
