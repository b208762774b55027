"""School registry service: register schools and list them by distance."""
