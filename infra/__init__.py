"""Process-level infrastructure: paths, settings and logging."""
