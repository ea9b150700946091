"""Utility helpers for the blackbox package."""
