"""Command-line interface for typed_sql."""
