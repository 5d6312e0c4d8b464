"""Physics methods."""
