"""Vulture whitelist: methods called by frameworks, not direct code."""

# Pydantic schema hooks: called by Pydantic, not our code
from ledger_digest.digest import Digest

Digest.__get_pydantic_core_schema__
Digest.__get_pydantic_json_schema__

from ledger_digest.typed import TypedDigest

TypedDigest.__get_pydantic_core_schema__
TypedDigest.__get_pydantic_json_schema__

# copy / pickle protocol: called by Python
Digest.__copy__
Digest.__deepcopy__
Digest.__reduce__
TypedDigest.__copy__
TypedDigest.__deepcopy__
TypedDigest.__reduce__

# Protocol members
from ledger_digest.canonical import CanonicalEncodable

CanonicalEncodable.encode_canonical
