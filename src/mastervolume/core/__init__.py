"""Core infrastructure: extension points, scheduling, logging and host seams."""
