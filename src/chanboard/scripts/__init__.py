"""Command-line database tooling."""
