"""patternlink - shorten pasted URLs into markdown links using configurable rules."""

__version__ = "0.1.0"
