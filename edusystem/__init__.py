"""Educational System API - materials, tests and scoring."""
