"""Query building, ordering, index management and execution."""
