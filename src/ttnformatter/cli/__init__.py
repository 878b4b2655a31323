"""Command-line interface for ttnformatter."""
