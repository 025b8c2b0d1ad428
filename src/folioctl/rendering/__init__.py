"""Rendering — view-model projection and the HTML adapter."""
