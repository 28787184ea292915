"""Infrastructure layer: filters, formatter adapters, config loading."""
