"""Push contact reconciler - removes permanently rejected device tokens."""
