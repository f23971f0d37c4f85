"""Store access and static lookups."""
