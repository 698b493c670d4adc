"""Small helpers shared by the repositories and the API."""
