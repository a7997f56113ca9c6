"""Configuration and security primitives (settings, password hashing, JWT)."""
