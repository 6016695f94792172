"""Cancellation parts; import from ``exec_context.base.cancellation`` instead."""
