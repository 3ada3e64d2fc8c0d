"""CLI entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from agent_models.config_loader import load_agent_config
from agent_models.model_resolution import resolve_model
from agent_models.models.models_config import AgentConfig
from agent_models.provider_registry import ProviderRegistry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agent-models")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve a provider/model pair")
    resolve.add_argument("--config", type=str, required=True)
    resolve.add_argument("--provider", type=str, required=True)
    resolve.add_argument("--model", type=str, required=True)
    resolve.add_argument("--agent-dir", type=str, default=None)

    list_models = subparsers.add_parser("list", help="List inline models")
    list_models.add_argument("--config", type=str, required=True)
    list_models.add_argument("--provider", type=str, default=None)
    return parser


def load_registry(config: AgentConfig) -> ProviderRegistry:
    registry = ProviderRegistry()
    registry.publish(config)
    return registry


def run_resolve(args: argparse.Namespace) -> int:
    config = load_agent_config(Path(args.config))
    registry = load_registry(config)
    resolution = resolve_model(args.provider, args.model, args.agent_dir, config, catalog=registry)
    print(resolution.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    if resolution.model is None:
        return 1
    return 0


def run_list(args: argparse.Namespace) -> int:
    config = load_agent_config(Path(args.config))
    models = load_registry(config).models()
    if args.provider is not None:
        models = [model for model in models if model.provider == args.provider.strip()]
    payload = [model.model_dump(mode="json", by_alias=True, exclude_none=True) for model in models]
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if args.command == "resolve":
        return run_resolve(args)
    return run_list(args)


if __name__ == "__main__":
    sys.exit(main())
