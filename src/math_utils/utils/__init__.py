"""Utility helpers for Math Utils."""
