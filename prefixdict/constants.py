"""Shared defaults for prefixdict."""

DEFAULT_SEP = "\n"
ENCODING = "utf-8"
