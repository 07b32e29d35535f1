"""Infrastructure layer: filters and adapters for sources, sinks, notifiers."""
