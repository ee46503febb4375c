"""Source package for the nutrition summary service."""
