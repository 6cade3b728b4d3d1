"""CPU hashing throughput check using Argon2id."""
