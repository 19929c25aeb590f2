"""Infrastructure adapters (database engine, sessions, repositories)."""
