#!/usr/bin/env python3
"""Start the Dice Chess API server."""

import argparse
import logging

import uvicorn
import yaml


def main():
    parser = argparse.ArgumentParser(description="Dice Chess API Server")
    parser.add_argument(
        "--config", default="configs/api_server.yaml",
        help="Path to server config YAML (default: configs/api_server.yaml)",
    )
    parser.add_argument("--host", default=None, help="Override host")
    parser.add_argument("--port", type=int, default=None, help="Override port")
    parser.add_argument("--seed", type=int, default=None, help="Override dice seed")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f) or {}

    server_cfg = config.get("server", {})
    host = args.host or server_cfg.get("host", "0.0.0.0")
    port = args.port or server_cfg.get("port", 8000)
    if args.seed is not None:
        config["dice"] = {**(config.get("dice") or {}), "seed": args.seed}

    from dicechess.api.server import app
    from dicechess.api.dependencies import init_app

    init_app(app, config)

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
