"""Host platform integration."""
