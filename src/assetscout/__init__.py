"""Discover Drupal front-end assets and build bundler entry mappings."""

__version__ = "0.1.0"
