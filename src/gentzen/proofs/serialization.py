"""JSON serialization for proof objects."""

import json
from pathlib import Path
from typing import Union

from gentzen.core.serialization import CoreJSONEncoder, decode_core_object
from .proof import Proof, ProofNode


class ProofJSONEncoder(CoreJSONEncoder):
    """JSON encoder for proof objects."""

    def default(self, obj):
        if isinstance(obj, ProofNode):
            return {
                "_type": "ProofNode",
                "sequent": obj.sequent,
                "rule_name": obj.rule_name,
                "status": obj.status,
                "children": list(obj.children)
            }

        elif isinstance(obj, Proof):
            return {
                "_type": "Proof",
                "formula": obj.formula,
                "tautology": obj.is_tautology,
                "counter_model": obj.counter_model().assignment if not obj.is_tautology else None,
                "root": obj.root
            }

        # Fall back to parent encoder
        return super().default(obj)


class ProofJSONDecoder(json.JSONDecoder):
    """JSON decoder for proof objects."""

    def __init__(self):
        super().__init__(object_hook=self.object_hook)

    def object_hook(self, obj):
        # First try core decoder
        result = decode_core_object(obj)
        if result is not obj:
            return result

        if obj.get("_type") == "ProofNode":
            return ProofNode(
                sequent=obj["sequent"],
                rule_name=obj.get("rule_name"),
                children=tuple(obj.get("children", []))
            )

        elif obj.get("_type") == "Proof":
            return Proof(obj["root"], obj.get("formula"))

        return obj


# Convenience functions
def proof_to_json(proof: Proof, indent: int = 2) -> str:
    """Convert a proof to a JSON string."""
    return json.dumps(proof, cls=ProofJSONEncoder, indent=indent)


def proof_from_json(json_str: str) -> Proof:
    """Create a proof from a JSON string."""
    return json.loads(json_str, cls=ProofJSONDecoder)


def save_proof(proof: Proof, file_path: Union[str, Path]) -> None:
    """Save a proof to a JSON file."""
    with open(file_path, 'w') as f:
        f.write(proof_to_json(proof))


def load_proof(file_path: Union[str, Path]) -> Proof:
    """Load a proof from a JSON file."""
    with open(file_path, 'r') as f:
        return proof_from_json(f.read())
