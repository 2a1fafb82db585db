"""User Registry API: an in-memory CRUD service for user records."""
