"""Built-in tool providers."""
