"""Environment-aware robots.txt generation."""
