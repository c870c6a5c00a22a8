"""Implementation modules for bwdelaunay; import public names from the package root."""
