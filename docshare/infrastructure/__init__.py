"""Infrastructure layer: backend gateway and view-state persistence."""
