"""Data models for Math Utils."""
