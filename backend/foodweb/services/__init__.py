"""Food web services."""
