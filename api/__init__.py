"""HTTP interface for the sliding move engine."""
