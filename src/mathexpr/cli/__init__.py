"""Command line interface for mathexpr."""
