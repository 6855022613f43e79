"""User management: service operations and the /api/users blueprint."""
