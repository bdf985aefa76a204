"""Host-side adapters implementing the core ports."""
