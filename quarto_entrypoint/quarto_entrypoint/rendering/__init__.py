"""Renderer invocation."""
