"""SenseRelate: word sense disambiguation by semantic relatedness."""

__version__ = "0.3.0"
