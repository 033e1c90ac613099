"""A minimal Unix-style shell toolkit: tokenizer, builtins, a two-command pipe runner and helpers."""

__version__ = "0.1.0"