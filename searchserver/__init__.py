"""In-memory full-text search with TF-IDF ranking, stop words, minus words, a request queue and pagination."""

__version__ = "0.1.0"