#!/usr/bin/env python
"""Run the WooCommerce node against a store using a JSON parameter file."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from woocommerce_node.config import get_settings
from woocommerce_node.exceptions import WooCommerceNodeError
from woocommerce_node.host import LocalExecutionContext
from woocommerce_node.integrations.woocommerce.transport import HttpTransport
from woocommerce_node.models.credentials import WooCommerceCredentials
from woocommerce_node.node import WooCommerceNode
from woocommerce_node.observability.logging import configure_logging


async def main() -> int:
    parser = argparse.ArgumentParser(description="Execute one WooCommerce resource operation")
    parser.add_argument(
        "--params",
        required=True,
        type=Path,
        help='JSON file of node parameters, e.g. {"resource": "order", "operation": "get", "orderId": 12}',
    )
    parser.add_argument(
        "--items",
        type=Path,
        help="JSON file with a list of per-item parameter overrides (default: one item)",
    )
    parser.add_argument(
        "--continue-on-fail",
        action="store_true",
        help="Emit {error: ...} records instead of stopping at the first failing item",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    parameters = json.loads(args.params.read_text())
    item_parameters = json.loads(args.items.read_text()) if args.items else [{}]

    transport = HttpTransport(timeout=settings.request_timeout)
    context = LocalExecutionContext(
        parameters=parameters,
        credentials=WooCommerceCredentials.from_settings(settings),
        items=[{} for _ in item_parameters],
        item_parameters=item_parameters,
        transport=transport,
        continue_on_fail=args.continue_on_fail,
    )
    try:
        output = await WooCommerceNode(settings).execute(context)
    except WooCommerceNodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await transport.close()

    print(json.dumps(output, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
