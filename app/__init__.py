"""Phone Agent Creator application."""
