"""Input and output helpers for project-tree."""
