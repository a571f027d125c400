"""Event type constants for Humanizer."""

# Run lifecycle events
RUN_STARTED = "run_started"
RUN_STATUS_CHANGED = "run_status_changed"
RUN_COMPLETED = "run_completed"
RUN_FAILED = "run_failed"
