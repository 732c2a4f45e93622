"""Input resolution and output layout."""
