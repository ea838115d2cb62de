"""Chess notation codecs: FEN, SAN and PGN."""

__version__ = "0.1.0"
