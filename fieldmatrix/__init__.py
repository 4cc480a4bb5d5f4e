"""Square matrices over pluggable numeric fields, with a field-call counter and a text menu."""

__version__ = "0.1.0"
__all__ = ["fields", "spy", "matrix", "cli"]