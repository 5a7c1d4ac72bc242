"""Utility helpers shared by binsign adapters and services."""
