"""People search proxy over Torre.ai's streaming search."""

import logging
from typing import Any

from models.responses import PaginationInfo, PeopleSearchResponse, PersonResult
from services.html_entities import decode_html_entities, safe_decode_html_entities
from services.torre_client import TorreClient

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


def to_person_result(node: dict[str, Any]) -> PersonResult | None:
    """Map one stream line; lines without ``ggId`` and ``name`` are skipped."""
    if node.get("ggId") is None or node.get("name") is None:
        return None
    gg_id = str(node["ggId"])
    return PersonResult(
        id=gg_id,
        name=decode_html_entities(str(node["name"])),
        professional_headline=safe_decode_html_entities(node.get("professionalHeadline")),
        picture=node.get("imageUrl"),
        username=node.get("username") or gg_id,
    )


async def search_people(client: TorreClient, query: str, limit: int) -> PeopleSearchResponse:
    rows = await client.search_stream(query, limit)
    results = [p for p in (to_person_result(r) for r in rows) if p is not None]
    logger.info("People search '%s' -> %d results (%d lines)", query, len(results), len(rows))
    return PeopleSearchResponse(
        results=results,
        pagination=PaginationInfo(
            total=len(results),
            current_page=1,
            page_size=PAGE_SIZE,
            total_results=len(results),
        ),
    )
