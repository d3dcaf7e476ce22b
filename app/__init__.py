"""Building dashboard configuration service."""
