"""Per-language string tables, one module per locale."""
