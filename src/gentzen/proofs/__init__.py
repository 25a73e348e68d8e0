"""
Proof trees and their construction.
"""

from .proof import Proof, ProofNode, CounterModel, AXIOM, FALSIFIABLE, INTERNAL
from .builder import expand, build_tree, build_proof
from .serialization import (
    ProofJSONEncoder, ProofJSONDecoder,
    proof_to_json, proof_from_json,
    save_proof, load_proof
)

__all__ = [
    'Proof', 'ProofNode', 'CounterModel',
    'AXIOM', 'FALSIFIABLE', 'INTERNAL',
    'expand', 'build_tree', 'build_proof',
    'ProofJSONEncoder', 'ProofJSONDecoder',
    'proof_to_json', 'proof_from_json',
    'save_proof', 'load_proof'
]
