"""Application workflows orchestrating the core with its I/O collaborators."""
