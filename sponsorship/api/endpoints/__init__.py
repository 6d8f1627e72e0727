"""API endpoint modules, one per resource."""
