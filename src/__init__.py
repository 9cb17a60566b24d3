"""Cash register dashboard package."""
