"""Framework adapters shared by the apps."""

# Router lookup pattern for UUID primary keys; malformed ids never reach a view.
UUID_PATTERN = "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
