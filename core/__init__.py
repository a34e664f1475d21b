"""Cross-cutting concerns shared by every layer."""
