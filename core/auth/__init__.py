"""OAuth2 bearer authentication for the admin API."""
