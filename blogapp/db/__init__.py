"""Database Metadata — the declarative Base every ORM model registers on."""
