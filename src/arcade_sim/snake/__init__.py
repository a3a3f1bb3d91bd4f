"""Grid snake: pure simulation core and pygame host."""
