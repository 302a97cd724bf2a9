# SPDX-License-Identifier: MIT

import secrets

type EntityId = str

ENTITY_ID_BYTES = 3


def generate_entity_id() -> EntityId:
    """Six lowercase hex characters."""
    return secrets.token_hex(ENTITY_ID_BYTES)
