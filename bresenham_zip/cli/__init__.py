"""Command line interface for bresenham_zip."""
