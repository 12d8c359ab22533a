#!/usr/bin/env python3
"""Paperless-AI MCP smoke test: connect over SSE, search, then fetch a document.

Usage:
    # Server on the default URL, API key from the environment
    API_KEY=... .venv/bin/python scripts/smoke_test_mcp.py

    # Different server / query
    .venv/bin/python scripts/smoke_test_mcp.py --url http://paperless-ai:3000 --query "tax 2023"
"""
import argparse
import asyncio
import json
import os
import sys

from mcp import ClientSession
from mcp.client.sse import sse_client


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Paperless-AI MCP smoke test")
    parser.add_argument("--url", default=os.environ.get("PAPERLESS_AI_URL", "http://localhost:3000"))
    parser.add_argument("--api-key", default=os.environ.get("API_KEY"))
    parser.add_argument("--query", default="invoice")
    parser.add_argument("--max-results", type=int, default=3)
    return parser.parse_args()


def _payload(result) -> dict:
    return json.loads(result.content[0].text)


async def smoke(url: str, api_key: str, query: str, max_results: int) -> int:
    print("Connecting to Paperless-AI MCP server...")
    async with sse_client(f"{url.rstrip('/')}/mcp/sse", headers={"Authorization": f"Bearer {api_key}"}) as (
        read_stream,
        write_stream,
    ):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()
            print("✓ Connected\n")

            tools = await session.list_tools()
            print("✓ Available tools:")
            for tool in tools.tools:
                print(f"  - {tool.name}: {tool.description}")
            print()

            print(f"Testing search_documents with query {query!r}...")
            search = await session.call_tool("search_documents", {"query": query, "max_results": max_results})
            results = _payload(search)
            if search.isError:
                print(f"✗ Search failed: {results.get('error')}")
                return 1

            print(f"  Total found: {results['total_found']}")
            print(f"  Returned: {len(results['results'])}")
            for index, doc in enumerate(results["results"], start=1):
                print(f"  {index}. [ID: {doc['doc_id']}] {doc['title']} (score {doc['score']})")
                if doc.get("snippet"):
                    print(f"     Snippet: {doc['snippet'][:100]}...")

            if not results["results"]:
                print("\nNo documents to retrieve; skipping get_document")
                return 0

            doc_id = results["results"][0]["doc_id"]
            print(f"\nTesting get_document with document ID {doc_id}...")
            retrieval = await session.call_tool("get_document", {"document_id": doc_id})
            document = _payload(retrieval)
            if retrieval.isError:
                print(f"✗ Retrieval failed: {document.get('error')}")
                return 1

            print(f"  Title: {document['title']}")
            print(f"  Correspondent: {document['correspondent']}")
            print(f"  Tags: {', '.join(document['tags']) or '-'}")
            print(f"  Created: {document['created']}")
            print(f"  Content length: {len(document['content'] or '')} characters")

    print("\n✓ All MCP tests passed")
    return 0


def main() -> int:
    args = _parse_args()
    if not args.api_key:
        print("Error: API_KEY environment variable is not set", file=sys.stderr)
        return 1
    try:
        return asyncio.run(smoke(args.url, args.api_key, args.query, args.max_results))
    except Exception as e:
        print(f"✗ MCP smoke test failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
