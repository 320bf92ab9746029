"""Listing and booking operations."""
