"""Key factory parts; import from ``exec_context.base.keys`` instead."""
