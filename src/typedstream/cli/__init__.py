"""Command-line interface for typedstream."""
