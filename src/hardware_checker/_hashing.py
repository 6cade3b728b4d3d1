"""Argon2id hashing primitive backed by ``argon2-cffi``."""

from __future__ import annotations

import logging
import os

from argon2 import Type
from argon2.low_level import hash_secret

from hardware_checker._constants import HASH_LEN, MEMORY_COST, SALT_LEN, TIME_COST

logger = logging.getLogger(__name__)


class Argon2Hasher:
    """Argon2id with fixed memory and time cost; lanes vary per call.

    Parameters
    ----------
    memory_cost : int
        Working-set size in KiB.
    time_cost : int
        Number of passes over memory.
    hash_len : int
        Raw hash length in bytes.
    salt_len : int
        Length of the random salt drawn for every call.
    """

    def __init__(
        self,
        memory_cost: int = MEMORY_COST,
        time_cost: int = TIME_COST,
        hash_len: int = HASH_LEN,
        salt_len: int = SALT_LEN,
    ) -> None:
        self.memory_cost = memory_cost
        self.time_cost = time_cost
        self.hash_len = hash_len
        self.salt_len = salt_len
        self.description = f"argon2id$v=19$m={memory_cost},t={time_cost}"
        logger.debug("Argon2Hasher: %s, hash_len=%d, salt_len=%d", self.description, hash_len, salt_len)

    def hash(self, password: bytes, parallelism: int) -> str:
        """Return the PHC-encoded Argon2id hash of ``password``.

        Raises ``argon2.exceptions.HashingError`` on an invalid parameter
        combination (e.g. memory cost below ``8 * parallelism``).
        """
        encoded = hash_secret(
            password,
            os.urandom(self.salt_len),
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=parallelism,
            hash_len=self.hash_len,
            type=Type.ID,
        )
        return encoded.decode("ascii")
