"""Configuration - environment settings and logging setup."""
