"""Command-line interface for project-tree."""
