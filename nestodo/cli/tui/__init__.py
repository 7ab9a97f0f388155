"""Terminal UI for nestodo."""
