"""Schéma d'engagement (commit-reveal) d'une partie.

L'empreinte couvre l'identifiant de la partie : un couple (coup, secret) capturé
dans une partie ne peut pas être rejoué dans une autre, et aucune table
(coup, secret) -> empreinte ne sert d'une partie à l'autre.
"""

import hashlib
import hmac

from shifumi.exceptions import game as exc

GAME_ID_BYTES = 32


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _game_id_bytes(game_id: int) -> bytes:
    if not _is_int(game_id) or game_id < 0 or game_id.bit_length() > GAME_ID_BYTES * 8:
        raise exc.InvalidGameId(game_id)
    return game_id.to_bytes(GAME_ID_BYTES, "big")


def _move_byte(move: int) -> bytes:
    # seul l'encodage sur un octet est vérifié ici
    if not _is_int(move) or not 0 <= move <= 255:
        raise exc.InvalidMove(move)
    return move.to_bytes(1, "big")


def _secret_bytes(secret: str | bytes) -> bytes:
    if isinstance(secret, bytes):
        return secret
    if not isinstance(secret, str):
        raise exc.InvalidSecret()
    try:
        return secret.encode("utf-8")
    except UnicodeEncodeError as e:
        raise exc.InvalidSecret() from e


def compute_commitment(game_id: int, move: int, secret: str | bytes) -> str:
    """Retourne l'empreinte SHA-256 (hex) de `game_id` (32 octets big-endian) || `move` (1 octet) || `secret`.

    Le coup n'est pas comparé à Pierre/Feuille/Ciseaux ici : cette validation a lieu lors de
    l'engagement et de la révélation. Lève InvalidGameId, InvalidMove ou InvalidSecret pour une
    entrée impossible à encoder.
    """
    payload = _game_id_bytes(game_id) + _move_byte(move) + _secret_bytes(secret)
    return hashlib.sha256(payload).hexdigest()


def matches_commitment(commitment: str, game_id: int, move: int, secret: str | bytes) -> bool:
    """Indique si (game_id, move, secret) reproduit l'engagement enregistré."""
    expected = compute_commitment(game_id, move, secret)
    return hmac.compare_digest(commitment.encode("utf-8"), expected.encode("utf-8"))
