"""HTTP layer for the Game of Life service."""
