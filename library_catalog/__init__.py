"""Personal library catalog backed by a Supabase table."""

__version__ = "0.1.0"
