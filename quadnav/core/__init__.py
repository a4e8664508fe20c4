"""Ambient configuration and logging for quadnav."""
