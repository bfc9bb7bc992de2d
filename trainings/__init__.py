"""Training catalog - course records, status lifecycle and date-range search."""
