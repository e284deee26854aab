"""Shared constants for Rampart."""
