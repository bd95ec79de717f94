"""Configuration, logging, database access and shared errors."""
