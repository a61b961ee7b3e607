"""Logging and metrics for telestate."""
