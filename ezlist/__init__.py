"""Sectioned list data-binding layer."""
