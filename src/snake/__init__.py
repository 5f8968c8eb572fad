"""Single-player Snake on a wraparound grid, drawn with pygame."""
