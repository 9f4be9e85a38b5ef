"""Output layout and Arrow schemas for evaluation artifacts."""
