"""Query command implementations."""

import json
from typing import Optional

from rich.console import Console
from rich.table import Table

from dohresolver.client.client import DoHClient, normalize_name
from dohresolver.core.models import RecordType

console = Console()


async def lookup(
    name: str,
    record_type: RecordType,
    url: Optional[str],
    options,
) -> bool:
    """Perform a lookup through the API and print the result."""
    client = DoHClient(base_url=url or options.settings.api_url)
    await client.connect()

    try:
        query_name = normalize_name(name)
        result = await client.lookup(query_name, record_type, normalize=False)

        if not result.ok:
            console.print(f"[red]Error: {result.error}[/]")
            return False

        if options.output.value == "json":
            console.print_json(
                json.dumps([a.model_dump(by_alias=True) for a in result.answers])
            )
            return True

        # Display results
        table = Table(title=f"DNS Query: {query_name} ({record_type.value})")
        table.add_column("Name", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("TTL", style="yellow")
        table.add_column("Data", style="green")

        for answer in result.answers:
            table.add_row(
                answer.name,
                str(answer.record_type),
                str(answer.ttl),
                answer.data,
            )

        console.print(table)
        if options.verbose:
            console.print(f"\nServer: {client.base_url}")
        return True

    finally:
        await client.disconnect()
