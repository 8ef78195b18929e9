"""Packaged ``.properties`` message catalogues."""
