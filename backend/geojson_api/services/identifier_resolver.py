# backend/geojson_api/services/identifier_resolver.py
# Classification d'un identifiant de chemin (ObjectId / code cca3 / nom) et construction des requêtes Mongo.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from bson import ObjectId

ID_FIELD = "_id"
NAME_FIELD = "country_name"
CODE_FIELD = "cca3_code"
CODE_LENGTH = 3


@dataclass(frozen=True)
class NativeId:
    value: ObjectId


@dataclass(frozen=True)
class ShortCode:
    value: str


@dataclass(frozen=True)
class Name:
    value: str


Identifier = Union[NativeId, ShortCode, Name]


def classify(raw: str) -> Identifier:
    """Classe un identifiant brut.

    Description:
        - ObjectId valide (24 caractères hexadécimaux) -> `NativeId`
        - sinon, exactement 3 caractères -> `ShortCode`
        - sinon -> `Name`
        Fonction totale : toute chaîne tombe dans exactement une branche.

    Args:
        raw (str): Paramètre de chemin tel que reçu.

    Returns:
        Identifier: Variante taguée.
    """
    if ObjectId.is_valid(raw):
        return NativeId(ObjectId(raw))
    if len(raw) == CODE_LENGTH:
        return ShortCode(raw)
    return Name(raw)


def read_query(raw: str) -> dict[str, Any]:
    """Requête de lecture : `_id` si ObjectId, sinon nom OU code (les deux champs sont tentés).

    Args:
        raw (str): Identifiant brut.

    Returns:
        dict: Filtre Mongo.
    """
    ident = classify(raw)
    if isinstance(ident, NativeId):
        return {ID_FIELD: ident.value}
    return {"$or": [{NAME_FIELD: raw}, {CODE_FIELD: raw}]}


def write_query(raw: str) -> dict[str, Any]:
    """Requête d'écriture (update/delete) : un seul champ ciblé.

    Description:
        Contrairement à la lecture, une chaîne de 3 caractères est toujours traitée
        comme un code cca3 et toute autre chaîne comme un nom, sans jamais tenter les deux.

    Args:
        raw (str): Identifiant brut.

    Returns:
        dict: Filtre Mongo.
    """
    ident = classify(raw)
    if isinstance(ident, NativeId):
        return {ID_FIELD: ident.value}
    if isinstance(ident, ShortCode):
        return {CODE_FIELD: ident.value}
    return {NAME_FIELD: ident.value}
