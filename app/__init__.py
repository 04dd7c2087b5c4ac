"""Role API: HTTP endpoints for role CRUD and role permission management."""
