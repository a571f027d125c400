"""Run state and result types."""
