"""Web API for tracked file times."""
