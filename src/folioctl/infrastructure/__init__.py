"""Infrastructure layer — template loading for the HTML adapter."""
