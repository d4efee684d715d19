"""Utility modules for tempile."""
