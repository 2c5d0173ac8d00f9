"""Built-in resource providers."""
