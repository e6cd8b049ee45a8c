"""Helpers shared by service facades."""
