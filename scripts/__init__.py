"""ArangoDB seeding and validation scripts.

| Script | Purpose |
|--------|---------|
| `seed_arango.py` | Creates `project_graph` and loads the sample project graph |
| `validate_seed.py` | Verifies collection counts and reference integrity |
| `seed_all.py` | Seeds, then validates |

Usage::

    # Seed and validate
    seed-all

    # Individual steps
    seed-arango
    validate-seed
"""
