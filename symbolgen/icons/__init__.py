"""Icon discovery, cleaning and XML parsing."""
