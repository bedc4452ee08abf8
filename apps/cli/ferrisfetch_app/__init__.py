"""Command-line app for ferris-fetch."""
