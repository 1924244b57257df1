# backend/geojson_api/core/bson_utils.py
# Sérialisation JSON des documents Mongo (ObjectId et autres types BSON -> JSON).

import base64
from typing import Any

from bson import Binary, Decimal128, ObjectId, Regex, Timestamp
from bson.dbref import DBRef
from bson.max_key import MaxKey
from bson.min_key import MinKey
from fastapi.encoders import jsonable_encoder


def _b64(value: bytes) -> str:
    return base64.b64encode(bytes(value)).decode("ascii")


# Binary hérite de bytes : il doit passer avant l'encodeur bytes par défaut (decode utf-8)
BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: str,
    Binary: _b64,
    bytes: _b64,
    Regex: lambda r: r.pattern if isinstance(r.pattern, str) else r.pattern.decode(),
    Timestamp: lambda ts: {"t": ts.time, "i": ts.inc},
    DBRef: lambda ref: {"$ref": ref.collection, "$id": serialize_document(ref.id)},
    MinKey: lambda _: {"$minKey": 1},
    MaxKey: lambda _: {"$maxKey": 1},
}


def serialize_document(value: Any) -> Any:
    """Convertit un document (ou une liste de documents) Mongo en structure JSON.

    Description:
        - `ObjectId` (dont `_id`) -> chaîne hexadécimale de 24 caractères
        - `Decimal128` -> chaîne décimale exacte (ex. "643801.5")
        - `Binary` / bytes -> base64
        - `Regex` -> motif, `Timestamp` -> `{"t", "i"}`, `DBRef` -> `{"$ref", "$id"}`
        Les dates restent gérées par `jsonable_encoder` (ISO 8601).

    Args:
        value (Any): Document, liste de documents ou payload simple.

    Returns:
        Any: Valeur encodable en JSON.
    """
    return jsonable_encoder(value, custom_encoder=BSON_ENCODERS)
