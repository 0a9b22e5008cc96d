"""Fixed seed data loaded before any operator command is accepted.

Seven cities (indices 1-7 in this order) and nine roads with budgets
in billion RWF. Also used as the shared test fixture.
"""

from __future__ import annotations

SEED_CITIES: tuple[str, ...] = (
    "Kigali",
    "Huye",
    "Muhanga",
    "Musanze",
    "Nyagatare",
    "Rubavu",
    "Rusizi",
)

SEED_ROADS: tuple[tuple[str, str, float], ...] = (
    ("Kigali", "Muhanga", 28.6),
    ("Kigali", "Musanze", 28.6),
    ("Kigali", "Nyagatare", 70.84),
    ("Muhanga", "Huye", 56.7),
    ("Musanze", "Rubavu", 33.7),
    ("Huye", "Rusizi", 80.96),
    ("Muhanga", "Rusizi", 117.5),
    ("Musanze", "Nyagatare", 96.14),
    ("Muhanga", "Musanze", 66.3),
)
