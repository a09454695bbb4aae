"""A tiny in-memory SQL database: tokenizer, parser, engine and interactive shell."""

__version__ = "1.0.0"