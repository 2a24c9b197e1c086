"""Command line interface for packdec."""
