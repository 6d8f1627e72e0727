"""Infrastructure: persistence, cache, security and external collaborators."""
