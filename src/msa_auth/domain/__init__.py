"""Domain layer of the auth core."""
