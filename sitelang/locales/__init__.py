"""Locale package for translation JSON resources.

Holds one ``<locale-id>.json`` dictionary per supported language, read through
importlib.resources so the files resolve both from a checkout and an install.
"""
