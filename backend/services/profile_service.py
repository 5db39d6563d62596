"""Profile lookup with HTML entity cleanup of the free-text fields."""

import logging

from models.schemas.person_details import Organization, PersonDetails
from services.html_entities import safe_decode_html_entities as _decode
from services.torre_client import TorreClient, UpstreamError

logger = logging.getLogger(__name__)


def _decode_organizations(organizations: list[Organization] | None) -> None:
    for org in organizations or []:
        if org is not None:
            org.name = _decode(org.name)
            org.about = _decode(org.about)


def decode_profile(details: PersonDetails) -> PersonDetails:
    """Decode entities in place and return ``details``."""
    if details.person is not None:
        person = details.person
        person.name = _decode(person.name)
        person.professional_headline = _decode(person.professional_headline)
        person.summary_of_bio = _decode(person.summary_of_bio)
        person.public_id = _decode(person.public_id)

    for strength in details.strengths or []:
        strength.name = _decode(strength.name)
        strength.experience = _decode(strength.experience)
        strength.proficiency = _decode(strength.proficiency)

    for entry in (details.experiences or []) + (details.education or []):
        entry.name = _decode(entry.name)
        _decode_organizations(entry.organizations)

    return details


async def get_person_details(client: TorreClient, username: str) -> PersonDetails:
    logger.info("Fetching profile details for username: %s", username)
    body = await client.fetch_bio(username)
    try:
        details = PersonDetails.model_validate(body)
    except ValueError as e:
        logger.error("Failed to parse Torre.ai profile response for '%s': %s", username, e)
        raise UpstreamError(f"Failed to parse profile response for '{username}'") from e

    logger.info("Successfully retrieved profile for username: %s", username)
    return decode_profile(details)
