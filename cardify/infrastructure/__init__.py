"""Infrastructure layer: text processing and document stores."""
