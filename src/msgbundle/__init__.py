"""Locale-aware message catalogues and unused message key detection."""
