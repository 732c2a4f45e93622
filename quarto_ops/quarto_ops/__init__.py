"""Host-side helpers driving the quarto-docker image."""
