"""HTTP interface for lane analytics."""
