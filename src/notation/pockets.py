"""Reserve (pocket) part of the placement field: a plain run of piece letters, ex. "QNnp"."""

import logging
from collections import Counter
from typing import Optional

from src.core.shared_types import Color
from src.notation.board import POCKET_CLOSE, POCKET_OPEN
from src.notation.mapping import Mapping, resolve_external, resolve_internal
from src.notation.pieces import Pocket, Pockets, Role

logger = logging.getLogger(__name__)


def read_pockets(pocket_fen: Optional[str], mapping: Mapping) -> Optional[Pockets]:
    """None when the notation had no reserve segment. An empty segment gives empty pockets."""
    if pocket_fen is None:
        return None

    counts: dict[Color, Counter[Role]] = {color: Counter() for color in Color}
    for character in pocket_fen:
        letter, color = resolve_external(character, mapping)
        counts[color][Role(letter)] += 1

    logger.debug("Read pockets %r", pocket_fen)
    return Pockets(
        white=dict(counts[Color.WHITE]),
        black=dict(counts[Color.BLACK]),
    )


def write_pockets(pockets: Optional[Pockets], mapping: Mapping) -> str:
    """
    Absent pockets are not written at all (not even as an empty bracket pair).
    ----
    NOTE: promoted kinds and wildcards are written as "+P" and "*", which `read_pockets` does not accept back
    (both characters are reserved). Pockets holding them do not survive a roundtrip.
    """
    if pockets is None:
        return ""
    return (
        POCKET_OPEN
        + _pocket_to_fen(pockets.white, Color.WHITE, mapping)
        + _pocket_to_fen(pockets.black, Color.BLACK, mapping)
        + POCKET_CLOSE
    )


def _pocket_to_fen(pocket: Pocket, color: Color, mapping: Mapping) -> str:
    """Roles are written in the order of the mapping, base kinds before promoted kinds, wildcards last."""
    return "".join(
        resolve_internal(role, color, mapping) * pocket[role]
        for role in sorted(pocket, key=_pocket_order)
    )


def _pocket_order(role: Role) -> tuple[bool, str, bool]:
    return role.is_wildcard, role.letter, role.promoted_kind
