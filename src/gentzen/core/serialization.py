"""JSON serialization for core objects."""

import json
from pathlib import Path
from typing import Dict, Any, Union

from .logic import Formula, Atom, Compound, Operator, Sequent


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for formulas and sequents."""

    def default(self, obj):
        if isinstance(obj, Atom):
            return {
                "_type": "Atom",
                "name": obj.name
            }

        elif isinstance(obj, Compound):
            return {
                "_type": "Compound",
                "operator": obj.operator.name,
                "operands": list(obj.operands)
            }

        elif isinstance(obj, Sequent):
            return {
                "_type": "Sequent",
                "assumptions": list(obj.assumptions),
                "conclusions": list(obj.conclusions)
            }

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to core objects."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Atom":
        return Atom(dct["name"])

    elif obj_type == "Compound":
        return Compound(Operator[dct["operator"]], *dct["operands"])

    elif obj_type == "Sequent":
        return Sequent(dct["assumptions"], dct["conclusions"])

    return dct


def to_json(obj: Union[Formula, Sequent], indent: int = 2) -> str:
    return json.dumps(obj, cls=CoreJSONEncoder, indent=indent)


def from_json(json_str: str) -> Union[Formula, Sequent]:
    return json.loads(json_str, object_hook=decode_core_object)


def save_sequent(sequent: Sequent, file_path: Union[str, Path]) -> None:
    """Save a sequent to a JSON file."""
    with open(file_path, 'w') as f:
        f.write(to_json(sequent))


def load_sequent(file_path: Union[str, Path]) -> Sequent:
    """Load a sequent from a JSON file."""
    with open(file_path, 'r') as f:
        result = from_json(f.read())
    if not isinstance(result, Sequent):
        raise ValueError(f"Expected a Sequent in {file_path}, got {type(result).__name__}")
    return result
