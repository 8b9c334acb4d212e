"""Docredirect - redirect pages for relocated documentation."""
