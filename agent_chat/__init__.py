"""Agent chat server package."""
