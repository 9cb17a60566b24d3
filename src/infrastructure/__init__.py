"""Infrastructure adapters for the cash register dashboard."""
