# Copyright 2026 Joseph Verdicchio
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import jsonschema

from hpkesuite import backend
from hpkesuite.ciphersuite.identifiers import CipherSuite
from hpkesuite.common.encoding import I2OSPError, os2ip
from hpkesuite.common.schema_validate import I2OSP_VECTORS_SCHEMA, validate_json
from hpkesuite.config import SuiteConfig, load_config

_LOGGER = logging.getLogger(__name__)


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def _cmd_i2osp(args: argparse.Namespace) -> int:
    print(backend.i2osp(args.value, args.length).hex())
    return 0


def _cmd_os2ip(args: argparse.Namespace) -> int:
    print(os2ip(bytes.fromhex(args.hex)))
    return 0


def _cmd_suite_id(args: argparse.Namespace) -> int:
    suite = CipherSuite.from_ids(args.kem, args.kdf, args.aead)
    print(suite.suite_id().hex())
    return 0


def _load_json_object(path: Path) -> dict:
    with open(path, encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError("payload must be a JSON object")
    return payload


def _cmd_vectors(args: argparse.Namespace) -> int:
    payload = _load_json_object(Path(args.file))
    validate_json(payload, I2OSP_VECTORS_SCHEMA)

    failures: list[str] = []
    for idx, vec in enumerate(payload["vectors"]):
        value, length = vec["value"], vec["length"]
        if any(isinstance(x, bool) or not isinstance(x, int) for x in (value, length)):
            raise ValueError(f"vector #{idx}: value and length must be integers")
        try:
            got = backend.i2osp(value, length).hex()
        except I2OSPError as exc:
            if not vec.get("error"):
                failures.append(f"#{idx} i2osp({value}, {length}) raised: {exc}")
            continue
        if vec.get("error"):
            failures.append(f"#{idx} i2osp({value}, {length}) = {got}, expected error")
        elif got != vec["expected"]:
            failures.append(f"#{idx} i2osp({value}, {length}) = {got}, expected {vec['expected']}")

    if failures:
        for line in failures:
            print(line)
        return 1
    print(f"OK: {len(payload['vectors'])} vectors ({backend.active_backend_name()})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hpkesuite")
    p.add_argument("--backend", choices=sorted(backend.BACKENDS), default=None)
    p.add_argument(
        "--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    enc = sub.add_parser("i2osp", help="Encode an integer as fixed-width big-endian hex")
    enc.add_argument("value", type=_parse_int)
    enc.add_argument("length", type=_parse_int)
    enc.set_defaults(func=_cmd_i2osp)

    dec = sub.add_parser("os2ip", help="Decode big-endian hex to an integer")
    dec.add_argument("hex")
    dec.set_defaults(func=_cmd_os2ip)

    sid = sub.add_parser("suite-id", help="Print the HPKE suite_id for a KEM/KDF/AEAD triple")
    sid.add_argument("--kem", type=_parse_int, required=True)
    sid.add_argument("--kdf", type=_parse_int, required=True)
    sid.add_argument("--aead", type=_parse_int, required=True)
    sid.set_defaults(func=_cmd_suite_id)

    vec = sub.add_parser("vectors", help="Check a JSON file of I2OSP vectors")
    vec.add_argument("file")
    vec.set_defaults(func=_cmd_vectors)

    return p


def _resolve_config(args: argparse.Namespace) -> SuiteConfig:
    config = load_config()
    overrides = {}
    if args.backend:
        overrides["i2osp_backend"] = args.backend
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        config = SuiteConfig.model_validate({**config.model_dump(), **overrides})
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _resolve_config(args)
    logging.basicConfig(level=config.log_level)
    backend.configure(config)
    try:
        rc = args.func(args)
    except (OSError, ValueError, jsonschema.ValidationError) as exc:
        _LOGGER.debug("command %s rejected", args.cmd, exc_info=True)
        print(f"error: {getattr(exc, 'message', exc)}", file=sys.stderr)
        rc = 2
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
