"""Configuration, database session, security primitives and error taxonomy."""
