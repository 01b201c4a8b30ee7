#!/usr/bin/env python3
"""Run asset contract operations against a JSON file ledger.

Usage
-----
    python scripts/asset_cli.py --ledger ledger.json init '{"version": "1.0"}'
    python scripts/asset_cli.py --ledger ledger.json createAsset '{"assetID": "A1", "temperature": 20.0}'
    python scripts/asset_cli.py --ledger ledger.json updateAsset '{"assetID": "A1", "carrier": "X"}'
    python scripts/asset_cli.py --ledger ledger.json readAsset '{"assetID": "A1"}'
    python scripts/asset_cli.py --ledger ledger.json readMruList
    python scripts/asset_cli.py -v --ledger ledger.json deleteAsset '{"assetID": "A1"}'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from assetledger import AssetContract, AssetLedgerError, ContractConfig, JsonFileLedger, Operation  # noqa: E402
from assetledger.router import dispatch  # noqa: E402


def _print_result(result: bytes | None) -> None:
    if result is None:
        print("OK")
        return
    text = result.decode("utf-8")
    try:
        print(json.dumps(json.loads(text), indent=2, sort_keys=True))
    except json.JSONDecodeError:
        print(text)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run an asset contract operation against a JSON file ledger.")
    parser.add_argument("operation", choices=[op.value for op in Operation], help="Operation name")
    parser.add_argument("args", nargs="*", help="JSON encoded arguments")
    parser.add_argument("--ledger", default="ledger.json", help="Ledger file (default: ledger.json)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    contract = AssetContract(JsonFileLedger(args.ledger), ContractConfig.from_env())
    try:
        result = dispatch(contract, args.operation, args.args)
    except AssetLedgerError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)
    _print_result(result)


if __name__ == "__main__":
    main()
