"""External collaborators: mail relay and certificate typesetter."""
