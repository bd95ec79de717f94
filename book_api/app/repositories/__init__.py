"""Persistence layer: one repository per table."""
