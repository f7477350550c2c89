"""Output layer — verdict lines, stats reports, and ServiceResult rendering."""
