"""User interface integration for the master volume."""
