"""Command line interface for rucker."""
