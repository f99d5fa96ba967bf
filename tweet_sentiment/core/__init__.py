"""Core components of the incremental sync: cursor, paginator, batcher, scorer, joiner and orchestrator."""
