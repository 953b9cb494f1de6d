"""Packaged translation dictionaries, one subpackage per version."""
