#!/usr/bin/env python3
"""
Check propositional formulas with the sequent calculus.

USAGE:
    gentzen "p -> p"
    gentzen "(p -> q) -> (!q -> !p)" --tree
    gentzen --file formulas.txt
    gentzen "p && !p" --json proof.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from gentzen.core.exceptions import ParseError
from gentzen.fileformats import get_format_handler, parse
from gentzen.proofs import Proof, build_proof
from gentzen.proofs.serialization import ProofJSONEncoder
from gentzen.utils.config import get_config

logger = logging.getLogger(__name__)

MARKERS = {"axiom": " [axiom]", "falsifiable": " [falsifiable]", "internal": ""}


def format_tree(proof: Proof) -> str:
    """Indented proof tree, one sequent per line."""
    lines = []
    stack = [(proof.root, 0)]
    while stack:
        node, level = stack.pop()
        rule = f"  ({node.rule_name})" if node.rule_name else ""
        lines.append(f"{'  ' * level}{node.sequent}{MARKERS[node.status]}{rule}")
        stack.extend((child, level + 1) for child in reversed(node.children))
    return "\n".join(lines)


def report(proof: Proof, show_tree: bool = False) -> str:
    lines = [f"Formula: {proof.formula}"]
    if proof.is_tautology:
        lines.append(f"Tautology (depth {proof.depth}, {proof.size} sequents)")
    else:
        lines.append(f"Not a tautology, counter-model: {proof.counter_model()}")
    if show_tree:
        lines.append(format_tree(proof))
    return "\n".join(lines)


def log_level(verbose: bool) -> str:
    if verbose:
        return "DEBUG"
    return str(get_config().get("logging.level", "WARNING")).upper()


def setup_logging(verbose: bool):
    logging.basicConfig(level=log_level(verbose), format=get_config().get("logging.format"))


def prove_file(path: Path, format_name=None):
    handler = get_format_handler(format_name, file_path=path)
    formulas = handler.parse_file(path)

    proofs = []
    tautologies = 0
    for formula in (pbar := tqdm(formulas, desc="Proving", unit="formula")):
        proof = build_proof(formula)
        proofs.append(proof)
        tautologies += proof.is_tautology
        pbar.set_postfix({"Tautologies": tautologies, "Falsifiable": len(proofs) - tautologies})
    return proofs


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check propositional formulas with the sequent calculus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("formula", nargs="?", help="Formula to prove, e.g. 'p -> (q -> p)'")
    parser.add_argument("--file", type=Path, help="Prove every formula in a file, one per line")
    parser.add_argument("--format", dest="format_name", help="File format (default: from extension)")
    parser.add_argument("--tree", action="store_true", help="Print the proof tree")
    parser.add_argument("--json", dest="json_output", type=Path, help="Write the proof(s) to a JSON file")
    parser.add_argument("--verbose", action="store_true", help="Log every parser reduction and rule application")

    args = parser.parse_args(argv)
    if (args.formula is None) == (args.file is None):
        parser.error("give either a formula or --file")

    setup_logging(args.verbose)

    try:
        if args.file is not None:
            if not args.file.exists():
                print(f"Error: File not found: {args.file}", file=sys.stderr)
                return 2
            proofs = prove_file(args.file, args.format_name)
        else:
            proofs = [build_proof(parse(args.formula))]
    except (ParseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for proof in proofs:
        print(report(proof, show_tree=args.tree))

    if len(proofs) > 1:
        tautologies = sum(proof.is_tautology for proof in proofs)
        print(f"\n{tautologies}/{len(proofs)} formulas are tautologies")

    if args.json_output:
        payload = proofs[0] if args.file is None else proofs
        with open(args.json_output, "w") as f:
            json.dump(payload, f, cls=ProofJSONEncoder, indent=2)
        logger.info("Wrote %s", args.json_output)

    return 0 if all(proof.is_tautology for proof in proofs) else 1


if __name__ == "__main__":
    sys.exit(main())
