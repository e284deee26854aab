"""Command-line interface for Rampart."""
