"""Command line interface for propbag."""
