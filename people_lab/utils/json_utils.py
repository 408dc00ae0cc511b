"""Extended JSON rendering for log output."""
from typing import Any, Mapping
from bson import json_util
from bson.json_util import RELAXED_JSON_OPTIONS


def to_json(document: Mapping[str, Any]) -> str:
    """
    Render a document as relaxed Extended JSON.
    
    ObjectId, datetime and other BSON types are rendered the way the
    MongoDB shell shows them (e.g. {"$oid": "..."}).
    """
    return json_util.dumps(document, json_options=RELAXED_JSON_OPTIONS, ensure_ascii=False)
