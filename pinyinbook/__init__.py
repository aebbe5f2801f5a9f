"""Address book with pinyin-based sorting, alphabetical indexing and a JSON store."""

__version__ = "0.1.0"