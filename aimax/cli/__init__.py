"""Command line interface for aimax."""
