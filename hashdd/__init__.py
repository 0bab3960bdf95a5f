"""Hash graph matching, trace rendering, detection results and meta data collections."""

__version__ = "0.1.0"