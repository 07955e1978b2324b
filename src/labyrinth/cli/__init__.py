"""Command-line interface for the maze builder."""
