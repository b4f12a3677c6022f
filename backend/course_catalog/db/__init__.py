"""Database: declarative Base for ORM models."""
