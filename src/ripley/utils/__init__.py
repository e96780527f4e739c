"""Utility modules for Ripley."""
