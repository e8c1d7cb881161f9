"""Configuration and the flag serialization engine."""
