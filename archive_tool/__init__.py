"""Generational backup rotation for named series of .tar.gz files."""
__version__ = "0.1.0"
