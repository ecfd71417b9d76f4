"""Release services."""
