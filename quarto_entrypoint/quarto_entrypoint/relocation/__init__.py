"""Moving and copying generated content to the output folder."""
