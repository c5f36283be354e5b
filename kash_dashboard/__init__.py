"""Kash personal-finance dashboard."""
