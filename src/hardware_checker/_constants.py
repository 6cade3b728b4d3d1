"""Fixed benchmark configuration."""

from __future__ import annotations

# Hash computations per phase, identical for every lane count

N_ITERATIONS = 1000

# Argon2id cost parameters (argon2id$v=19$m=65536,t=1)

MEMORY_COST = 65536  # KiB
TIME_COST = 1
HASH_LEN = 32
SALT_LEN = 16
