"""Task recurrence rules and daily points aggregation."""
