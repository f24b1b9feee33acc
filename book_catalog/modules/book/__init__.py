"""Book resource: schema, remote repository and UI state store."""
