"""Services Layer: the only code that talks to the database session."""
