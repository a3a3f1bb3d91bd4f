"""Obstacle flyer: pure physics core and pygame host."""
