"""Services package - business logic on top of the repositories."""
