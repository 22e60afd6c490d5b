"""Search internals: parsing, comment recovery, matching, worker pool."""
