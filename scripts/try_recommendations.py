#!/usr/bin/env python3
"""
Recommendation Workflow Try-Out Script

Runs real recommendation cycles against Gemini from the command line,
without starting the API server.

Usage:
    python scripts/try_recommendations.py
    python scripts/try_recommendations.py --query "gaming laptop under 1500"
    python scripts/try_recommendations.py --suite
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from shopai.schemas.recommendations import DisplayState
from shopai.services.catalog_store import get_catalog_store
from shopai.services.recommendation_client import get_recommendation_client
from shopai.services.workflow_controller import WorkflowController
from shopai.utils.constants import SUGGESTED_QUERIES


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_state(state: DisplayState) -> None:
    """Pretty print a settled DisplayState."""
    print("\n" + "=" * 60)
    print(f"STATUS: {state.status}  ({state.item_count} items)")
    print("=" * 60)

    if state.error:
        print(f"\n❌ {state.error}\n")
        return

    print(f'\n✅ Results for "{state.current_query}":\n')
    for product in state.products:
        print(f"  #{product.id:<3} {product.name:<28} {product.category:<12} ${product.price:,.2f}")
    print()


async def run_query(controller: WorkflowController, query: str) -> DisplayState:
    """Run a single recommendation cycle and print the outcome."""
    print(f"\nQuery: {query}")
    print("Calling Gemini API...")

    await controller.run_query(query)
    state = controller.state
    print_state(state)

    controller.reset()
    return state


async def run_suite(controller: WorkflowController) -> None:
    """Run the example queries plus a couple of known edge cases."""
    test_cases = [
        ("gaming laptop under 1500", "MATCHED"),
        ("luxury yacht", "NO_MATCH"),
    ]
    test_cases.extend((query, "MATCHED") for query in SUGGESTED_QUERIES.values())

    passed = 0
    for i, (query, expected) in enumerate(test_cases, 1):
        print(f"\n{'#' * 60}\n# TEST {i}/{len(test_cases)} (expect {expected})\n{'#' * 60}")
        state = await run_query(controller, query)
        if state.status == expected:
            passed += 1

        # Delay between tests to avoid rate limits
        await asyncio.sleep(2)

    print("\n" + "=" * 60)
    print(f"Total: {len(test_cases)} | As expected: {passed} | Different: {len(test_cases) - passed}")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Try the ShopAI recommendation workflow against the real Gemini API"
    )
    parser.add_argument(
        "--query", "-q",
        type=str,
        help="Free-text product request"
    )
    parser.add_argument(
        "--suite",
        action="store_true",
        help="Run the example queries"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if not os.getenv("GOOGLE_API_KEY"):
        print("\n⚠️  ERROR: GOOGLE_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GOOGLE_API_KEY=your-gemini-api-key")
        sys.exit(1)

    controller = WorkflowController(
        catalog=get_catalog_store(),
        client=get_recommendation_client(),
    )

    if args.suite:
        asyncio.run(run_suite(controller))
    else:
        asyncio.run(run_query(controller, args.query or "gaming laptop under 1500"))


if __name__ == "__main__":
    main()
