"""Query and mutation classes, one module per entity."""
