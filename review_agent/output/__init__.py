"""Terminal output and review files."""
